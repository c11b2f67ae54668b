"""
Fixed taxonomy for the tech catalog: areas, niches and the skill type enum.

Areas are the root of the taxonomy (one per AreaType). Niches belong to
exactly one area and are what skills point at. Both lists are static seeds
upserted on every sync.
"""

from enum import Enum


class AreaType(str, Enum):
    DEVELOPMENT = "DEVELOPMENT"
    DEVOPS = "DEVOPS"
    DATA = "DATA"
    SECURITY = "SECURITY"
    DESIGN = "DESIGN"
    PRODUCT = "PRODUCT"
    QA = "QA"
    INFRASTRUCTURE = "INFRASTRUCTURE"
    OTHER = "OTHER"


class SkillType(str, Enum):
    LANGUAGE = "LANGUAGE"
    FRAMEWORK = "FRAMEWORK"
    LIBRARY = "LIBRARY"
    DATABASE = "DATABASE"
    TOOL = "TOOL"
    PLATFORM = "PLATFORM"
    METHODOLOGY = "METHODOLOGY"
    SOFT_SKILL = "SOFT_SKILL"
    CERTIFICATION = "CERTIFICATION"
    OTHER = "OTHER"


TECH_AREAS = [
    {
        "area_type": AreaType.DEVELOPMENT,
        "name_en": "Development",
        "name_local": "Desenvolvimento",
        "description_en": "Software development and programming",
        "description_local": "Desenvolvimento de software e programação",
        "icon": "code",
        "color": "#3B82F6",
        "order": 1,
    },
    {
        "area_type": AreaType.DEVOPS,
        "name_en": "DevOps & Infrastructure",
        "name_local": "DevOps e Infraestrutura",
        "description_en": "DevOps, cloud infrastructure, and operations",
        "description_local": "DevOps, infraestrutura cloud e operações",
        "icon": "server",
        "color": "#8B5CF6",
        "order": 2,
    },
    {
        "area_type": AreaType.DATA,
        "name_en": "Data & AI",
        "name_local": "Dados e IA",
        "description_en": "Data science, analytics, machine learning, and AI",
        "description_local": "Ciência de dados, analytics, machine learning e IA",
        "icon": "database",
        "color": "#10B981",
        "order": 3,
    },
    {
        "area_type": AreaType.SECURITY,
        "name_en": "Security",
        "name_local": "Segurança",
        "description_en": "Cybersecurity, penetration testing, and compliance",
        "description_local": "Cibersegurança, testes de penetração e conformidade",
        "icon": "shield",
        "color": "#EF4444",
        "order": 4,
    },
    {
        "area_type": AreaType.DESIGN,
        "name_en": "Design",
        "name_local": "Design",
        "description_en": "UI/UX design, product design, and visual design",
        "description_local": "Design UI/UX, design de produto e design visual",
        "icon": "palette",
        "color": "#EC4899",
        "order": 5,
    },
    {
        "area_type": AreaType.PRODUCT,
        "name_en": "Product",
        "name_local": "Produto",
        "description_en": "Product management, strategy, and growth",
        "description_local": "Gestão de produto, estratégia e crescimento",
        "icon": "lightbulb",
        "color": "#F59E0B",
        "order": 6,
    },
    {
        "area_type": AreaType.QA,
        "name_en": "Quality Assurance",
        "name_local": "Qualidade",
        "description_en": "Testing, quality assurance, and automation",
        "description_local": "Testes, garantia de qualidade e automação",
        "icon": "check-circle",
        "color": "#14B8A6",
        "order": 7,
    },
    {
        "area_type": AreaType.INFRASTRUCTURE,
        "name_en": "Infrastructure",
        "name_local": "Infraestrutura",
        "description_en": "Networks, systems administration, and hardware",
        "description_local": "Redes, administração de sistemas e hardware",
        "icon": "network",
        "color": "#6366F1",
        "order": 8,
    },
    {
        "area_type": AreaType.OTHER,
        "name_en": "Other",
        "name_local": "Outros",
        "description_en": "Other tech skills and tools",
        "description_local": "Outras habilidades e ferramentas tech",
        "icon": "more-horizontal",
        "color": "#64748B",
        "order": 99,
    },
]


# Order within an area is the display order of its niches.
TECH_NICHES = [
    # Development
    {
        "slug": "frontend",
        "area_type": AreaType.DEVELOPMENT,
        "name_en": "Frontend",
        "name_local": "Frontend",
        "description_en": "User interface and client-side development",
        "description_local": "Interface do usuário e desenvolvimento client-side",
        "icon": "layout",
        "color": "#3B82F6",
        "order": 1,
    },
    {
        "slug": "backend",
        "area_type": AreaType.DEVELOPMENT,
        "name_en": "Backend",
        "name_local": "Backend",
        "description_en": "Server-side development and APIs",
        "description_local": "Desenvolvimento server-side e APIs",
        "icon": "server",
        "color": "#10B981",
        "order": 2,
    },
    {
        "slug": "fullstack",
        "area_type": AreaType.DEVELOPMENT,
        "name_en": "Fullstack",
        "name_local": "Fullstack",
        "description_en": "Full-stack web development",
        "description_local": "Desenvolvimento web full-stack",
        "icon": "layers",
        "color": "#8B5CF6",
        "order": 3,
    },
    {
        "slug": "mobile",
        "area_type": AreaType.DEVELOPMENT,
        "name_en": "Mobile",
        "name_local": "Mobile",
        "description_en": "iOS, Android, and cross-platform mobile development",
        "description_local": "Desenvolvimento mobile iOS, Android e multiplataforma",
        "icon": "smartphone",
        "color": "#F59E0B",
        "order": 4,
    },
    {
        "slug": "game-dev",
        "area_type": AreaType.DEVELOPMENT,
        "name_en": "Game Development",
        "name_local": "Desenvolvimento de Jogos",
        "description_en": "Video game development",
        "description_local": "Desenvolvimento de jogos",
        "icon": "gamepad",
        "color": "#EF4444",
        "order": 5,
    },
    {
        "slug": "embedded",
        "area_type": AreaType.DEVELOPMENT,
        "name_en": "Embedded Systems",
        "name_local": "Sistemas Embarcados",
        "description_en": "Embedded and IoT development",
        "description_local": "Desenvolvimento embarcado e IoT",
        "icon": "cpu",
        "color": "#6366F1",
        "order": 6,
    },
    {
        "slug": "blockchain",
        "area_type": AreaType.DEVELOPMENT,
        "name_en": "Blockchain",
        "name_local": "Blockchain",
        "description_en": "Blockchain and Web3 development",
        "description_local": "Desenvolvimento blockchain e Web3",
        "icon": "link",
        "color": "#14B8A6",
        "order": 7,
    },
    # DevOps
    {
        "slug": "devops",
        "area_type": AreaType.DEVOPS,
        "name_en": "DevOps",
        "name_local": "DevOps",
        "description_en": "CI/CD, automation, and DevOps practices",
        "description_local": "CI/CD, automação e práticas DevOps",
        "icon": "git-branch",
        "color": "#8B5CF6",
        "order": 1,
    },
    {
        "slug": "cloud",
        "area_type": AreaType.DEVOPS,
        "name_en": "Cloud",
        "name_local": "Cloud",
        "description_en": "Cloud platforms and services",
        "description_local": "Plataformas e serviços cloud",
        "icon": "cloud",
        "color": "#3B82F6",
        "order": 2,
    },
    {
        "slug": "sre",
        "area_type": AreaType.DEVOPS,
        "name_en": "Site Reliability",
        "name_local": "Confiabilidade de Site",
        "description_en": "Site reliability engineering and monitoring",
        "description_local": "Engenharia de confiabilidade e monitoramento",
        "icon": "activity",
        "color": "#EF4444",
        "order": 3,
    },
    # Data
    {
        "slug": "data-science",
        "area_type": AreaType.DATA,
        "name_en": "Data Science",
        "name_local": "Ciência de Dados",
        "description_en": "Data analysis and statistical modeling",
        "description_local": "Análise de dados e modelagem estatística",
        "icon": "bar-chart",
        "color": "#10B981",
        "order": 1,
    },
    {
        "slug": "machine-learning",
        "area_type": AreaType.DATA,
        "name_en": "Machine Learning",
        "name_local": "Machine Learning",
        "description_en": "Machine learning and deep learning",
        "description_local": "Machine learning e deep learning",
        "icon": "brain",
        "color": "#8B5CF6",
        "order": 2,
    },
    {
        "slug": "data-engineering",
        "area_type": AreaType.DATA,
        "name_en": "Data Engineering",
        "name_local": "Engenharia de Dados",
        "description_en": "Data pipelines and infrastructure",
        "description_local": "Pipelines de dados e infraestrutura",
        "icon": "database",
        "color": "#F59E0B",
        "order": 3,
    },
    {
        "slug": "data-analytics",
        "area_type": AreaType.DATA,
        "name_en": "Data Analytics",
        "name_local": "Análise de Dados",
        "description_en": "Business intelligence and analytics",
        "description_local": "Business intelligence e analytics",
        "icon": "pie-chart",
        "color": "#3B82F6",
        "order": 4,
    },
    # Security
    {
        "slug": "security",
        "area_type": AreaType.SECURITY,
        "name_en": "Security",
        "name_local": "Segurança",
        "description_en": "Application and infrastructure security",
        "description_local": "Segurança de aplicações e infraestrutura",
        "icon": "shield",
        "color": "#EF4444",
        "order": 1,
    },
    {
        "slug": "pentesting",
        "area_type": AreaType.SECURITY,
        "name_en": "Penetration Testing",
        "name_local": "Teste de Penetração",
        "description_en": "Ethical hacking and vulnerability assessment",
        "description_local": "Hacking ético e avaliação de vulnerabilidades",
        "icon": "target",
        "color": "#DC2626",
        "order": 2,
    },
    # Design
    {
        "slug": "design",
        "area_type": AreaType.DESIGN,
        "name_en": "UI/UX Design",
        "name_local": "Design UI/UX",
        "description_en": "User interface and experience design",
        "description_local": "Design de interface e experiência do usuário",
        "icon": "figma",
        "color": "#EC4899",
        "order": 1,
    },
    # QA
    {
        "slug": "qa",
        "area_type": AreaType.QA,
        "name_en": "QA Testing",
        "name_local": "Testes QA",
        "description_en": "Manual and automated testing",
        "description_local": "Testes manuais e automatizados",
        "icon": "check-square",
        "color": "#14B8A6",
        "order": 1,
    },
    {
        "slug": "test-automation",
        "area_type": AreaType.QA,
        "name_en": "Test Automation",
        "name_local": "Automação de Testes",
        "description_en": "Test automation frameworks and tools",
        "description_local": "Frameworks e ferramentas de automação de testes",
        "icon": "play-circle",
        "color": "#10B981",
        "order": 2,
    },
    # Infrastructure
    {
        "slug": "networks",
        "area_type": AreaType.INFRASTRUCTURE,
        "name_en": "Networks",
        "name_local": "Redes",
        "description_en": "Network administration and architecture",
        "description_local": "Administração e arquitetura de redes",
        "icon": "wifi",
        "color": "#6366F1",
        "order": 1,
    },
    {
        "slug": "sysadmin",
        "area_type": AreaType.INFRASTRUCTURE,
        "name_en": "System Administration",
        "name_local": "Administração de Sistemas",
        "description_en": "Server and system administration",
        "description_local": "Administração de servidores e sistemas",
        "icon": "terminal",
        "color": "#64748B",
        "order": 2,
    },
]
