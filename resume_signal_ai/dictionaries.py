"""
Process-wide keyword dictionaries used by the heuristic stages.

Everything here is read-only: tuples, frozensets and MappingProxyType views.
Extend by editing this module; never mutate at runtime.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

# ---- Section headers (ordered: first match wins) ----
SECTION_HEADER_PATTERNS: Tuple[Tuple[str, str], ...] = (
    ("summary", r"professional\s+summary|summary|profile|objective|about\s+me|about"),
    ("experience", r"work\s+experience|professional\s+experience|experience|employment(?:\s+history)?|work\s+history"),
    ("education", r"education|academic(?:s|\s+background)?|qualifications"),
    ("skills", r"technical\s+skills|skills|competencies|expertise|technologies"),
    ("projects", r"key\s+projects|projects|portfolio"),
    ("achievements", r"achievements|accomplishments|awards|honou?rs"),
    ("certifications", r"certifications|certificates|licen[cs]es"),
)

# Words that may precede a section name on a header line ("Relevant Experience", "Core Competencies").
SECTION_HEADER_QUALIFIERS: Tuple[str, ...] = (
    "relevant", "professional", "work", "core", "key", "technical", "executive",
    "career", "personal", "academic", "selected", "notable", "additional", "other",
    "related", "industry", "research", "volunteer", "leadership", "areas", "of",
)

# ---- Skills ----
SKILL_CATEGORIES: Tuple[str, ...] = (
    "programming",
    "database",
    "cloud",
    "devops",
    "frontend",
    "backend",
    "mobile",
    "other",
)

# category -> canonical display names
TECH_SKILLS_BY_CATEGORY: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "programming": (
        "JavaScript", "TypeScript", "Python", "Java", "C#", "C++", "Go",
        "Rust", "PHP", "Ruby", "Swift", "Kotlin", "Scala", "Perl", "Dart", "SQL",
    ),
    "frontend": (
        "React", "Vue.js", "Angular", "Svelte", "Next.js", "Nuxt.js", "HTML", "CSS",
        "SASS", "Tailwind CSS", "Bootstrap", "jQuery", "Redux", "Webpack", "Vite",
    ),
    "backend": (
        "Node.js", "Express.js", "Django", "Flask", "FastAPI", "Spring Boot",
        "ASP.NET", ".NET", "Laravel", "Ruby on Rails", "Nest.js", "GraphQL",
    ),
    "database": (
        "MySQL", "PostgreSQL", "MongoDB", "Redis", "SQLite", "Oracle", "SQL Server",
        "Cassandra", "DynamoDB", "Elasticsearch", "MariaDB", "Neo4j",
    ),
    "cloud": (
        "AWS", "Azure", "GCP", "Google Cloud", "Heroku", "Vercel", "Netlify",
        "DigitalOcean", "Firebase", "Supabase",
    ),
    "devops": (
        "Docker", "Kubernetes", "Jenkins", "GitHub Actions", "GitLab CI", "Terraform",
        "Ansible", "Chef", "Puppet", "Vagrant", "CI/CD", "Git",
    ),
    "mobile": (
        "React Native", "Flutter", "Android", "iOS", "Xamarin", "Ionic", "Cordova",
    ),
})

# alias (lowercase) -> canonical name
SKILL_ALIASES: Mapping[str, str] = MappingProxyType({
    "js": "JavaScript",
    "ts": "TypeScript",
    "reactjs": "React",
    "react.js": "React",
    "vue": "Vue.js",
    "vuejs": "Vue.js",
    "nodejs": "Node.js",
    "node": "Node.js",
    "postgres": "PostgreSQL",
    "mongo": "MongoDB",
    "k8s": "Kubernetes",
    "amazon web services": "AWS",
    "google cloud platform": "GCP",
    "golang": "Go",
})

# Which SkillsProfile list a canonical technical skill also lands in
FRAMEWORK_CATEGORIES: frozenset = frozenset({"frontend", "backend", "mobile"})
LANGUAGE_CATEGORIES: frozenset = frozenset({"programming"})
TOOL_CATEGORIES: frozenset = frozenset({"devops"})
# Frontend entries that are markup/styling or build tooling, not frameworks
NON_FRAMEWORK_SKILLS: frozenset = frozenset({"HTML", "CSS", "SASS", "Webpack", "Vite", "Android", "iOS", "GraphQL"})

TOOLS: Tuple[str, ...] = (
    "Jira", "Confluence", "Figma", "Sketch", "Photoshop", "VS Code", "IntelliJ",
    "Postman", "Slack", "Trello", "Tableau", "Power BI", "Jupyter", "Webpack", "Vite",
)

SOFT_SKILLS: Tuple[str, ...] = (
    "Leadership", "Communication", "Teamwork", "Problem Solving", "Analytical Thinking",
    "Project Management", "Time Management", "Adaptability", "Creativity", "Mentoring",
    "Collaboration", "Critical Thinking", "Negotiation", "Public Speaking",
)

CERTIFICATION_KEYWORDS: Tuple[str, ...] = (
    "AWS Certified", "Azure Certified", "Google Cloud Certified", "Certified Kubernetes",
    "CKA", "CKAD", "PMP", "Scrum Master", "CSM", "CISSP", "CompTIA", "OCA", "OCP",
)

# ---- Experience ----
COMPANY_SUFFIXES: Tuple[str, ...] = (
    "corp", "inc", "ltd", "llc", "company", "technologies", "systems", "solutions",
)

ROLE_KEYWORDS: Tuple[str, ...] = (
    "developer", "engineer", "manager", "director", "analyst", "consultant",
    "designer", "architect", "lead", "senior", "junior", "intern",
)

INDUSTRY_KEYWORDS: Tuple[str, ...] = (
    "technology", "software", "healthcare", "finance", "banking", "consulting",
    "retail", "e-commerce", "education", "manufacturing", "automotive",
)

# ---- Education ----
# Two-letter abbreviations need dots ("M.S.") or capitals followed by "in"/"of" and a
# subject ("MS in Physics"); bare "ms" / "MA" are units and places.
DEGREE_PATTERNS: Tuple[Tuple[str, str], ...] = (
    ("bachelor", r"bachelor(?:'?s)?|(?<![a-z])b\.\s?[sa]\.?(?![a-z])|(?-i:(?<![A-Za-z])B[SA](?![A-Za-z]))(?=\s+(?:in|of)\s+[a-z])|(?<![a-z])b\.?tech(?![a-z])|(?<![a-z])b\.?sc\.?(?![a-z])"),
    ("master", r"master(?:'?s)?|(?<![a-z])m\.\s?[sa]\.?(?![a-z])|(?-i:(?<![A-Za-z])M[SA](?![A-Za-z]))(?=\s+(?:in|of)\s+[a-z])|(?<![a-z])mba(?![a-z])|(?<![a-z])m\.?sc\.?(?![a-z])"),
    ("doctorate", r"(?<![a-z])ph\.?d\.?(?![a-z])|doctorate|doctor\s+of"),
    ("associate", r"associate(?:'?s)?\s+(?:degree|of)|(?<![a-z])a\.s\.(?![a-z])|(?<![a-z])a\.a\.(?![a-z])"),
)

FIELDS_OF_STUDY: Tuple[str, ...] = (
    "computer science", "software engineering", "information technology", "engineering",
    "business", "mathematics", "physics", "chemistry", "biology", "psychology",
    "economics", "marketing", "data science", "statistics",
)

INSTITUTION_KEYWORDS: Tuple[str, ...] = (
    "university", "college", "institute", "school", "academy", "polytechnic",
)

EDUCATION_HONOURS: Tuple[str, ...] = (
    "dean's list", "summa cum laude", "magna cum laude", "cum laude",
    "first class", "honours", "honors", "valedictorian", "scholarship",
)

# ---- Quality scoring ----
RELEVANCE_KEYWORDS: Tuple[str, ...] = ("developer", "engineer", "programming", "software")

# Spoken languages are not technical skills; skipped when listing unknown skill items
SPOKEN_LANGUAGES: Tuple[str, ...] = (
    "english", "spanish", "french", "german", "chinese", "mandarin", "japanese",
    "hindi", "arabic", "portuguese", "russian", "italian", "urdu", "korean",
)
