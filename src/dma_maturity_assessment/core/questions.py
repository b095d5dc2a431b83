"""Data Maturity Assessment question catalog.

Contains 35 diagnostic questions across 11 subdomains, grouped into 3 domain
groups. Subdomains are the scoreable dimensions: each receives its own
average score.

Domain groups:
    data_lifecycle         : collection, infrastructure, quality, analysis,
                             application, strategy
    governance_protection  : security, responsible use
    organizational_enablers: leadership, talent, culture

Every question is answered with one of five scored options (1-5) or one of
the excluded options 'na' (Not Applicable) and 'ns' (Not Sure).

Respondents answer as one of five roles; each role is presented the
questions of a fixed subset of subdomains.
"""

from dataclasses import dataclass

from dma_maturity_assessment.core.errors import UnknownRoleError

DATA_LIFECYCLE = "data_lifecycle"
GOVERNANCE_PROTECTION = "governance_protection"
ORGANIZATIONAL_ENABLERS = "organizational_enablers"

ALL_DOMAIN_GROUPS: list[str] = [
    DATA_LIFECYCLE,
    GOVERNANCE_PROTECTION,
    ORGANIZATIONAL_ENABLERS,
]

SCORED_OPTIONS: tuple[int, ...] = (1, 2, 3, 4, 5)
EXCLUDED_OPTIONS: dict[str, str] = {
    "na": "Not Applicable to my role/organization",
    "ns": "Not Sure/Don't Know",
}


@dataclass(frozen=True)
class Subdomain:
    """A scoreable grouping of related questions.

    Attributes:
        subdomain_id: Unique identifier (e.g., 'data_collection').
        name: Display name.
        description: What the subdomain assesses.
        domain_group: Domain group this subdomain belongs to.
        display_order: Position in results listings, starting at 1.
    """

    subdomain_id: str
    name: str
    description: str
    domain_group: str
    display_order: int


@dataclass(frozen=True)
class AssessmentQuestion:
    """A single diagnostic question.

    Attributes:
        question_id: Unique identifier ('Q1' to 'Q35').
        dimension: Subdomain this question is scored under.
        title: Short question title.
        description: What the question probes.
    """

    question_id: str
    dimension: str
    title: str
    description: str


SUBDOMAINS: list[Subdomain] = [
    Subdomain(
        "data_collection",
        "Data Collection",
        "Systematic approach to identifying, gathering, and capturing data",
        DATA_LIFECYCLE,
        1,
    ),
    Subdomain(
        "infrastructure",
        "Infrastructure",
        "Technical foundation for storing, processing, and integrating data",
        DATA_LIFECYCLE,
        2,
    ),
    Subdomain(
        "quality",
        "Quality",
        "Systematic management of data accuracy, consistency, and reliability",
        DATA_LIFECYCLE,
        3,
    ),
    Subdomain(
        "analysis",
        "Analysis",
        "Sophistication in examining data and generating insights",
        DATA_LIFECYCLE,
        4,
    ),
    Subdomain(
        "application",
        "Application",
        "Converting insights into actions and improvements",
        DATA_LIFECYCLE,
        5,
    ),
    Subdomain(
        "strategy",
        "Strategy",
        "Integration of data into high-level decision-making",
        DATA_LIFECYCLE,
        6,
    ),
    Subdomain(
        "security",
        "Security",
        "Protection through access controls, monitoring, and recovery",
        GOVERNANCE_PROTECTION,
        7,
    ),
    Subdomain(
        "responsible",
        "Responsible Use",
        "Ethical practices, compliance, and stakeholder trust",
        GOVERNANCE_PROTECTION,
        8,
    ),
    Subdomain(
        "leadership",
        "Leadership",
        "Executive commitment and modeling of data-driven approaches",
        ORGANIZATIONAL_ENABLERS,
        9,
    ),
    Subdomain(
        "talent",
        "Talent",
        "Ability to attract, develop, and retain data skills",
        ORGANIZATIONAL_ENABLERS,
        10,
    ),
    Subdomain(
        "culture",
        "Culture",
        "Attitudes, behaviors, and norms that encourage data use",
        ORGANIZATIONAL_ENABLERS,
        11,
    ),
]


@dataclass(frozen=True)
class Role:
    """A respondent role and the subdomains it is asked about.

    Attributes:
        role_id: Unique identifier (e.g., 'it_technology').
        title: Display title.
        description: Who the role covers.
        examples: Typical job titles.
        estimated_time: Expected time to complete the role's questions.
        subdomains: Subdomain ids presented to this role.
    """

    role_id: str
    title: str
    description: str
    examples: tuple[str, ...]
    estimated_time: str
    subdomains: tuple[str, ...]


ROLES: list[Role] = [
    Role(
        "executive",
        "Executive/C-Suite Level",
        "You make strategic decisions and set organizational direction",
        ("CEO", "COO", "CTO", "CDO", "VP Strategy"),
        "15-20 minutes",
        ("strategy", "leadership", "culture", "responsible", "security"),
    ),
    Role(
        "it_technology",
        "IT/Technology Department",
        "You manage technical systems and data infrastructure",
        ("IT Director", "Data Engineer", "System Administrator", "Infrastructure Manager"),
        "10-15 minutes",
        ("infrastructure", "quality", "security"),
    ),
    Role(
        "bi_analytics",
        "Business Intelligence/Analytics Team",
        "You work with data analysis, reporting, and insights generation",
        ("Data Analyst", "BI Developer", "Data Scientist", "Analytics Manager"),
        "10-15 minutes",
        ("analysis", "application", "quality"),
    ),
    Role(
        "business_managers",
        "Department/Business Unit Managers",
        "You lead teams and make operational decisions using data",
        ("Department Head", "Operations Manager", "Product Manager", "Business Manager"),
        "10-15 minutes",
        ("application", "strategy", "culture"),
    ),
    Role(
        "data_governance",
        "Data Governance/Compliance Team",
        "You ensure data policies, compliance, and risk management",
        ("Data Governance Manager", "Compliance Officer", "Privacy Officer", "Risk Manager"),
        "10-15 minutes",
        ("responsible", "security", "quality"),
    ),
]

ROLES_BY_ID: dict[str, Role] = {r.role_id: r for r in ROLES}


# (question_id, subdomain, title, description)
_QUESTION_ROWS: list[tuple[str, str, str, str]] = [
    # Data Collection (Q1-Q3)
    ("Q1", "data_collection", "Data Needs Identification",
     "Strategic approach to determining what data to collect"),
    ("Q2", "data_collection", "Collection Process Design",
     "Methodology for implementing new data collection initiatives"),
    ("Q3", "data_collection", "Collection Standardization",
     "Consistency of collection across organizational units"),
    # Infrastructure (Q4-Q6)
    ("Q4", "infrastructure", "Data Integration Capability",
     "Technical ability to combine data from multiple sources"),
    ("Q5", "infrastructure", "System Reliability and Performance",
     "Dependability and operational stability"),
    ("Q6", "infrastructure", "Scalability and Capacity Management",
     "Ability to handle growing data volumes"),
    # Quality (Q7-Q9)
    ("Q7", "quality", "Error Detection and Correction",
     "Processes for identifying and fixing quality issues"),
    ("Q8", "quality", "Data Consistency Management",
     "Coordination across multiple systems"),
    ("Q9", "quality", "Data Standards and Documentation",
     "Knowledge management for proper data use"),
    # Analysis (Q10-Q13)
    ("Q10", "analysis", "Causal Analysis Capability",
     "Understanding why events occur"),
    ("Q11", "analysis", "Predictive Analysis and Planning",
     "Anticipating future challenges"),
    ("Q12", "analysis", "Program Evaluation Rigor",
     "Measuring effectiveness and impact"),
    ("Q13", "analysis", "Comparative Analysis and Benchmarking",
     "Competitive intelligence capability"),
    # Application (Q14-Q16)
    ("Q14", "application", "Insight Implementation Process",
     "Speed of translating discoveries into action"),
    ("Q15", "application", "Performance Problem Response",
     "Addressing poor performance revealed by data"),
    ("Q16", "application", "Change Management",
     "Adaptability when data challenges practices"),
    # Strategy (Q17-Q19)
    ("Q17", "strategy", "Data-Driven Resource Allocation",
     "Evidence-based budget decisions"),
    ("Q18", "strategy", "Strategic Expansion Analysis",
     "Rigor in major strategic decisions"),
    ("Q19", "strategy", "Impact Communication",
     "Demonstrating value through data"),
    # Security (Q20-Q22)
    ("Q20", "security", "Access Control Management",
     "Rigor of data access approval processes"),
    ("Q21", "security", "Security Lifecycle Management",
     "Access management throughout the employee lifecycle"),
    ("Q22", "security", "Disaster Recovery",
     "Preparedness for system failures"),
    # Responsible use (Q23-Q25)
    ("Q23", "responsible", "Privacy and Consent Management",
     "Transparency in data collection"),
    ("Q24", "responsible", "Regulatory Compliance Management",
     "Staying current with regulations"),
    ("Q25", "responsible", "Ethical Data Use Evaluation",
     "Systematic evaluation of ethical implications"),
    # Leadership (Q26-Q29)
    ("Q26", "leadership", "Leadership Data Advocacy",
     "Active promotion by senior leaders"),
    ("Q27", "leadership", "Leadership Adaptability",
     "Response to uncomfortable truths"),
    ("Q28", "leadership", "Strategic Investment",
     "Resource allocation priority"),
    ("Q29", "leadership", "Organizational Change Management",
     "Managing organizational resistance"),
    # Talent (Q30-Q32)
    ("Q30", "talent", "Technical Talent Adequacy",
     "Sufficiency of technical skills"),
    ("Q31", "talent", "Data Literacy Development",
     "Systematic skill development across the organization"),
    ("Q32", "talent", "Talent Acquisition and Retention",
     "Building an analytical workforce"),
    # Culture (Q33-Q35)
    ("Q33", "culture", "Data-Driven Innovation",
     "Openness to challenging assumptions"),
    ("Q34", "culture", "Cross-Functional Collaboration",
     "Collaboration between teams"),
    ("Q35", "culture", "Experimentation Culture",
     "Encouragement of data-driven learning"),
]

QUESTION_BANK: list[AssessmentQuestion] = [
    AssessmentQuestion(question_id=qid, dimension=dim, title=title, description=desc)
    for qid, dim, title, desc in _QUESTION_ROWS
]

# Convenience mappings for fast lookup
QUESTIONS_BY_ID: dict[str, AssessmentQuestion] = {q.question_id: q for q in QUESTION_BANK}

QUESTIONS_BY_DIMENSION: dict[str, list[AssessmentQuestion]] = {}
for _question in QUESTION_BANK:
    QUESTIONS_BY_DIMENSION.setdefault(_question.dimension, []).append(_question)

SUBDOMAINS_BY_ID: dict[str, Subdomain] = {s.subdomain_id: s for s in SUBDOMAINS}

ALL_DIMENSIONS: list[str] = [s.subdomain_id for s in SUBDOMAINS]


def get_role(role_id: str) -> Role:
    """Return the role with the given id.

    Raises:
        UnknownRoleError: If the id is not in the role catalog.
    """
    role = ROLES_BY_ID.get(role_id)
    if role is None:
        raise UnknownRoleError(f"Unknown role_id {role_id!r}")
    return role


def question_counts(role_id: str | None = None) -> dict[str, int]:
    """Return the number of catalog questions per subdomain, in display order.

    With a role, only the subdomains presented to that role are included.

    Raises:
        UnknownRoleError: If role_id is given but not in the role catalog.
    """
    dimensions = ALL_DIMENSIONS
    if role_id is not None:
        role_subdomains = set(get_role(role_id).subdomains)
        dimensions = [d for d in ALL_DIMENSIONS if d in role_subdomains]
    return {
        dimension: len(QUESTIONS_BY_DIMENSION.get(dimension, []))
        for dimension in dimensions
    }
