import pytest

SCENARIO_A = """Jane Doe
Education
XYZ University Mumbai, India
B.Tech (CGPA: 9.0) 2020 – 2024
Experience
Software Engineer June 2022 – Present
Acme Corp Remote / Pune
• Reduced latency by 40%
"""

FULL_RESUME = """Aarav Shah
+91 8879029981 | aarav@example.com | linkedin.com/in/aarav | github.com/aarav | aarav.dev

Education
Dwarkadas J. Sanghvi College of Engineering Mumbai, India
B.Tech in Computer Engineering (CGPA: 8.56) 2022 – 2026
Sheth Junior College Mumbai, India
HSC 2020 – 2022

Experience
SDE Intern June 2024 – Present
Infiheal Remote / Mumbai
• Built the booking API
• Cut page load by 30%
Full Stack Developer (Freelance) May 2024 – Sept 2024
Self Employed Remote
• Shipped two client sites

Projects
Summarizer-CLI | Node.js, LLMs, NPM Jan 2024 – Present
• Summarises files from the terminal
• Published on npm
Video Conferencing Platform | Next.js, Stream SDK, Clerk Jan 2024
• Rooms with screen sharing

Technical Skills
Languages: JavaScript, TypeScript, Python
Frameworks & Libraries: React, Next.js, Express

Positions of Responsibility
Vice Chairperson (Tech) June 2024 – June 2025
DJS ACM Student Chapter
• Ran weekly workshops
"""


@pytest.fixture
def scenario_a():
    return SCENARIO_A


@pytest.fixture
def full_resume():
    return FULL_RESUME
