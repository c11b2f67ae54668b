"""
Static lookup tables used to classify and enrich catalog records.

Everything here is plain constant data. build_catalog_tables() freezes it into
one CatalogTables object that the classifier and parsers receive explicitly;
nothing mutates the tables after that.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from tech_catalog.taxonomy import SkillType

F = SkillType.FRAMEWORK
L = SkillType.LIBRARY
D = SkillType.DATABASE
T = SkillType.TOOL
P = SkillType.PLATFORM
M = SkillType.METHODOLOGY


# ---------------------------------------------------------------------------
# Category sub-maps: raw tag (or slug) -> (skill type, niche slug)
# ---------------------------------------------------------------------------

FRAMEWORK_CATEGORIES = {
    "reactjs": (F, "frontend"),
    "react": (F, "frontend"),
    "angular": (F, "frontend"),
    "angularjs": (F, "frontend"),
    "vue.js": (F, "frontend"),
    "vuejs3": (F, "frontend"),
    "svelte": (F, "frontend"),
    "next.js": (F, "fullstack"),
    "nuxt.js": (F, "fullstack"),
    "remix": (F, "fullstack"),
    "node.js": (P, "backend"),
    "express": (F, "backend"),
    "nestjs": (F, "backend"),
    "django": (F, "backend"),
    "flask": (F, "backend"),
    "fastapi": (F, "backend"),
    "spring": (F, "backend"),
    "spring-boot": (F, "backend"),
    "ruby-on-rails": (F, "backend"),
    "laravel": (F, "backend"),
    "symfony": (F, "backend"),
    "asp.net": (F, "backend"),
    "asp.net-core": (F, "backend"),
    "asp.net-mvc": (F, "backend"),
    ".net": (P, "backend"),
    ".net-core": (P, "backend"),
    "phoenix-framework": (F, "backend"),
    "graphql": (T, "backend"),
    "react-native": (F, "mobile"),
    "flutter": (F, "mobile"),
    "xamarin": (F, "mobile"),
    "ionic-framework": (F, "mobile"),
    "android": (P, "mobile"),
    "ios": (P, "mobile"),
    "swiftui": (F, "mobile"),
    "jetpack-compose": (F, "mobile"),
    "unity-game-engine": (P, "game-dev"),
    "unreal-engine4": (P, "game-dev"),
    "godot": (P, "game-dev"),
    "arduino": (P, "embedded"),
    "raspberry-pi": (P, "embedded"),
    "electron": (F, "frontend"),
    "tailwind-css": (F, "frontend"),
    "twitter-bootstrap": (F, "frontend"),
}

DATABASE_CATEGORIES = {
    "mysql": (D, "backend"),
    "postgresql": (D, "backend"),
    "sql-server": (D, "backend"),
    "oracle-database": (D, "backend"),
    "sqlite": (D, "backend"),
    "mongodb": (D, "backend"),
    "redis": (D, "backend"),
    "cassandra": (D, "data-engineering"),
    "elasticsearch": (D, "backend"),
    "firebase": (P, "backend"),
    "dynamodb": (D, "cloud"),
    "neo4j": (D, "backend"),
    "mariadb": (D, "backend"),
    "couchdb": (D, "backend"),
    "cloudant": (D, "cloud"),
    "supabase": (P, "backend"),
    "snowflake-cloud-data-platform": (D, "data-engineering"),
    "google-bigquery": (D, "data-engineering"),
    "amazon-redshift": (D, "data-engineering"),
}

DEVOPS_CATEGORIES = {
    "docker": (T, "devops"),
    "kubernetes": (T, "devops"),
    "docker-compose": (T, "devops"),
    "jenkins": (T, "devops"),
    "github-actions": (T, "devops"),
    "gitlab-ci": (T, "devops"),
    "terraform": (T, "devops"),
    "ansible": (T, "devops"),
    "helm": (T, "devops"),
    "nginx": (T, "sysadmin"),
    "apache": (T, "sysadmin"),
    "amazon-web-services": (P, "cloud"),
    "aws-lambda": (P, "cloud"),
    "amazon-s3": (P, "cloud"),
    "amazon-ec2": (P, "cloud"),
    "azure": (P, "cloud"),
    "google-cloud-platform": (P, "cloud"),
    "heroku": (P, "cloud"),
    "vercel": (P, "cloud"),
    "prometheus": (T, "sre"),
    "grafana": (T, "sre"),
    "linux": (P, "sysadmin"),
    "firebase": (P, "cloud"),
}

DATA_AI_CATEGORIES = {
    "pandas": (L, "data-science"),
    "numpy": (L, "data-science"),
    "matplotlib": (L, "data-science"),
    "scikit-learn": (L, "machine-learning"),
    "tensorflow": (F, "machine-learning"),
    "keras": (F, "machine-learning"),
    "pytorch": (F, "machine-learning"),
    "machine-learning": (M, "machine-learning"),
    "deep-learning": (M, "machine-learning"),
    "nlp": (M, "machine-learning"),
    "computer-vision": (M, "machine-learning"),
    "opencv": (L, "machine-learning"),
    "huggingface-transformers": (L, "machine-learning"),
    "langchain": (F, "machine-learning"),
    "apache-spark": (F, "data-engineering"),
    "pyspark": (F, "data-engineering"),
    "hadoop": (F, "data-engineering"),
    "apache-kafka": (T, "data-engineering"),
    "airflow": (T, "data-engineering"),
    "dbt": (T, "data-engineering"),
    "tableau-api": (T, "data-analytics"),
    "powerbi": (T, "data-analytics"),
    "excel": (T, "data-analytics"),
    "jupyter-notebook": (T, "data-science"),
    "data-science": (M, "data-science"),
}

TESTING_CATEGORIES = {
    "unit-testing": (M, "qa"),
    "junit": (F, "test-automation"),
    "pytest": (F, "test-automation"),
    "jestjs": (F, "test-automation"),
    "mocha.js": (F, "test-automation"),
    "cypress": (F, "test-automation"),
    "selenium": (T, "test-automation"),
    "selenium-webdriver": (T, "test-automation"),
    "playwright": (F, "test-automation"),
    "testng": (F, "test-automation"),
    "mockito": (L, "test-automation"),
    "cucumber": (F, "test-automation"),
    "postman": (T, "qa"),
    "jmeter": (T, "qa"),
}

DESIGN_CATEGORIES = {
    "figma": (T, "design"),
    "adobe-xd": (T, "design"),
    "sketch-3": (T, "design"),
    "photoshop": (T, "design"),
    "user-interface": (M, "design"),
    "user-experience": (M, "design"),
    "css-animations": (T, "frontend"),
    "material-ui": (L, "frontend"),
}

SECURITY_CATEGORIES = {
    "security": (M, "security"),
    "oauth-2.0": (T, "security"),
    "jwt": (T, "security"),
    "ssl": (T, "security"),
    "encryption": (M, "security"),
    "cryptography": (M, "security"),
    "penetration-testing": (M, "pentesting"),
    "owasp": (M, "security"),
    "keycloak": (T, "security"),
    "spring-security": (F, "security"),
    "xss": (M, "pentesting"),
    "sql-injection": (M, "pentesting"),
}

COLLABORATION_CATEGORIES = {
    "git": (T, "devops"),
    "github": (P, "devops"),
    "gitlab": (P, "devops"),
    "bitbucket": (P, "devops"),
    "jira": (T, None),
    "confluence": (T, None),
    "slack": (T, None),
}

LIBRARY_CATEGORIES = {
    "jquery": (L, "frontend"),
    "redux": (L, "frontend"),
    "rxjs": (L, "frontend"),
    "axios": (L, "frontend"),
    "webpack": (T, "frontend"),
    "vite": (T, "frontend"),
    "babeljs": (T, "frontend"),
    "npm": (T, "backend"),
    "yarnpkg": (T, "frontend"),
    "hibernate": (L, "backend"),
    "sqlalchemy": (L, "backend"),
    "entity-framework": (L, "backend"),
    "prisma": (L, "backend"),
    "mongoose": (L, "backend"),
    "sequelize.js": (L, "backend"),
    "socket.io": (L, "backend"),
    "lodash": (L, "frontend"),
    "d3.js": (L, "data-analytics"),
    "three.js": (L, "frontend"),
    "celery": (L, "backend"),
    "maven": (T, "backend"),
    "gradle": (T, "backend"),
}

METHODOLOGY_CATEGORIES = {
    "agile": (M, None),
    "scrum": (M, None),
    "kanban": (M, None),
    "tdd": (M, "qa"),
    "bdd": (M, "qa"),
    "design-patterns": (M, "backend"),
    "microservices": (M, "backend"),
    "rest": (M, "backend"),
    "oop": (M, None),
    "functional-programming": (M, None),
    "ci-cd": (M, "devops"),
    "domain-driven-design": (M, "backend"),
}

BLOCKCHAIN_CATEGORIES = {
    "blockchain": (P, "blockchain"),
    "ethereum": (P, "blockchain"),
    "web3js": (L, "blockchain"),
    "smartcontracts": (M, "blockchain"),
    "hyperledger-fabric": (P, "blockchain"),
}

IDE_CATEGORIES = {
    "visual-studio-code": (T, None),
    "visual-studio": (T, None),
    "intellij-idea": (T, None),
    "eclipse": (T, None),
    "android-studio": (T, "mobile"),
    "xcode": (T, "mobile"),
    "pycharm": (T, None),
    "vim": (T, None),
    "jupyter-notebook": (T, None),
}

# Registration order; a key in several sub-maps keeps its first registration.
CATEGORY_SUBMAPS = (
    FRAMEWORK_CATEGORIES,
    DATABASE_CATEGORIES,
    DEVOPS_CATEGORIES,
    DATA_AI_CATEGORIES,
    TESTING_CATEGORIES,
    DESIGN_CATEGORIES,
    SECURITY_CATEGORIES,
    COLLABORATION_CATEGORIES,
    LIBRARY_CATEGORIES,
    METHODOLOGY_CATEGORIES,
    BLOCKCHAIN_CATEGORIES,
    IDE_CATEGORIES,
)


# ---------------------------------------------------------------------------
# Skill display data
# ---------------------------------------------------------------------------

SKILL_DISPLAY_NAMES = {
    "reactjs": "React",
    "react": "React",
    "angular": "Angular",
    "angularjs": "AngularJS",
    "vue.js": "Vue.js",
    "vuejs3": "Vue 3",
    "next.js": "Next.js",
    "nuxt.js": "Nuxt.js",
    "node.js": "Node.js",
    "nestjs": "NestJS",
    "fastapi": "FastAPI",
    "spring-boot": "Spring Boot",
    "ruby-on-rails": "Ruby on Rails",
    "asp.net": "ASP.NET",
    "asp.net-core": "ASP.NET Core",
    "asp.net-mvc": "ASP.NET MVC",
    ".net": ".NET",
    ".net-core": ".NET Core",
    "graphql": "GraphQL",
    "react-native": "React Native",
    "ios": "iOS",
    "swiftui": "SwiftUI",
    "unity-game-engine": "Unity",
    "unreal-engine4": "Unreal Engine",
    "tailwind-css": "Tailwind CSS",
    "twitter-bootstrap": "Bootstrap",
    "mysql": "MySQL",
    "postgresql": "PostgreSQL",
    "sql-server": "SQL Server",
    "oracle-database": "Oracle Database",
    "sqlite": "SQLite",
    "mongodb": "MongoDB",
    "dynamodb": "DynamoDB",
    "couchdb": "CouchDB",
    "mariadb": "MariaDB",
    "snowflake-cloud-data-platform": "Snowflake",
    "google-bigquery": "BigQuery",
    "amazon-redshift": "Amazon Redshift",
    "github-actions": "GitHub Actions",
    "gitlab-ci": "GitLab CI",
    "amazon-web-services": "AWS",
    "aws-lambda": "AWS Lambda",
    "amazon-s3": "Amazon S3",
    "amazon-ec2": "Amazon EC2",
    "google-cloud-platform": "Google Cloud",
    "numpy": "NumPy",
    "scikit-learn": "scikit-learn",
    "tensorflow": "TensorFlow",
    "pytorch": "PyTorch",
    "opencv": "OpenCV",
    "huggingface-transformers": "Hugging Face Transformers",
    "langchain": "LangChain",
    "apache-spark": "Apache Spark",
    "pyspark": "PySpark",
    "apache-kafka": "Apache Kafka",
    "airflow": "Apache Airflow",
    "tableau-api": "Tableau",
    "powerbi": "Power BI",
    "jupyter-notebook": "Jupyter",
    "junit": "JUnit",
    "jestjs": "Jest",
    "mocha.js": "Mocha",
    "testng": "TestNG",
    "jmeter": "JMeter",
    "adobe-xd": "Adobe XD",
    "sketch-3": "Sketch",
    "material-ui": "Material UI",
    "oauth-2.0": "OAuth 2.0",
    "owasp": "OWASP",
    "xss": "XSS",
    "github": "GitHub",
    "gitlab": "GitLab",
    "jquery": "jQuery",
    "rxjs": "RxJS",
    "babeljs": "Babel",
    "npm": "npm",
    "yarnpkg": "Yarn",
    "sqlalchemy": "SQLAlchemy",
    "sequelize.js": "Sequelize",
    "socket.io": "Socket.IO",
    "d3.js": "D3.js",
    "three.js": "Three.js",
    "tdd": "TDD",
    "bdd": "BDD",
    "oop": "OOP",
    "ci-cd": "CI/CD",
    "web3js": "Web3.js",
    "smartcontracts": "Smart Contracts",
    "visual-studio-code": "VS Code",
    "intellij-idea": "IntelliJ IDEA",
    "pycharm": "PyCharm",
    "xcode": "Xcode",
}

# Brazilian Portuguese display names; only entries that differ from English.
SKILL_TRANSLATIONS = {
    "machine-learning": "Aprendizado de Máquina",
    "deep-learning": "Aprendizado Profundo",
    "nlp": "Processamento de Linguagem Natural",
    "computer-vision": "Visão Computacional",
    "data-science": "Ciência de Dados",
    "unit-testing": "Testes Unitários",
    "user-interface": "Interface do Usuário",
    "user-experience": "Experiência do Usuário",
    "security": "Segurança",
    "encryption": "Criptografia",
    "cryptography": "Criptografia",
    "penetration-testing": "Teste de Penetração",
    "sql-injection": "Injeção de SQL",
    "design-patterns": "Padrões de Projeto",
    "microservices": "Microsserviços",
    "functional-programming": "Programação Funcional",
    "oop": "Programação Orientada a Objetos",
    "tdd": "Desenvolvimento Orientado a Testes",
    "bdd": "Desenvolvimento Orientado a Comportamento",
    "domain-driven-design": "Design Orientado a Domínio",
    "smartcontracts": "Contratos Inteligentes",
    "ci-cd": "Integração e Entrega Contínuas",
    "agile": "Ágil",
    "excel": "Excel",
}

SKILL_COLORS = {
    "reactjs": "#61DAFB",
    "react": "#61DAFB",
    "angular": "#DD0031",
    "vue.js": "#4FC08D",
    "svelte": "#FF3E00",
    "next.js": "#000000",
    "node.js": "#339933",
    "express": "#000000",
    "nestjs": "#E0234E",
    "django": "#092E20",
    "flask": "#000000",
    "fastapi": "#009688",
    "spring": "#6DB33F",
    "spring-boot": "#6DB33F",
    "ruby-on-rails": "#CC0000",
    "laravel": "#FF2D20",
    ".net": "#512BD4",
    "graphql": "#E10098",
    "flutter": "#02569B",
    "android": "#3DDC84",
    "mysql": "#4479A1",
    "postgresql": "#4169E1",
    "mongodb": "#47A248",
    "redis": "#DC382D",
    "elasticsearch": "#005571",
    "firebase": "#FFCA28",
    "docker": "#2496ED",
    "kubernetes": "#326CE5",
    "jenkins": "#D24939",
    "terraform": "#7B42BC",
    "ansible": "#EE0000",
    "amazon-web-services": "#FF9900",
    "azure": "#0078D4",
    "google-cloud-platform": "#4285F4",
    "linux": "#FCC624",
    "tensorflow": "#FF6F00",
    "pytorch": "#EE4C2C",
    "pandas": "#150458",
    "numpy": "#013243",
    "apache-kafka": "#231F20",
    "jestjs": "#C21325",
    "cypress": "#17202C",
    "selenium": "#43B02A",
    "figma": "#F24E1E",
    "git": "#F05032",
    "github": "#181717",
    "gitlab": "#FC6D26",
    "jquery": "#0769AD",
    "webpack": "#8DD6F9",
    "ethereum": "#3C3C3D",
}

SKILL_ALIASES = {
    "reactjs": ["react", "react.js"],
    "react": ["reactjs", "react.js"],
    "vue.js": ["vue", "vuejs"],
    "angular": ["angular2", "ng"],
    "next.js": ["next", "nextjs"],
    "node.js": ["node", "nodejs"],
    "nestjs": ["nest"],
    "express": ["expressjs", "express.js"],
    "ruby-on-rails": ["rails", "ror"],
    ".net": ["dotnet"],
    "asp.net-core": ["aspnetcore", "asp.net core"],
    "postgresql": ["postgres", "psql"],
    "mongodb": ["mongo"],
    "sql-server": ["mssql", "t-sql"],
    "elasticsearch": ["elastic", "es"],
    "kubernetes": ["k8s", "kube"],
    "amazon-web-services": ["aws"],
    "google-cloud-platform": ["gcp", "google cloud"],
    "azure": ["microsoft azure"],
    "github-actions": ["gha"],
    "scikit-learn": ["sklearn"],
    "tensorflow": ["tf"],
    "apache-kafka": ["kafka"],
    "apache-spark": ["spark"],
    "jestjs": ["jest"],
    "powerbi": ["power bi"],
    "visual-studio-code": ["vscode", "vs code"],
    "ci-cd": ["cicd", "continuous integration", "continuous delivery"],
    "machine-learning": ["ml"],
    "nlp": ["natural language processing"],
    "user-experience": ["ux"],
    "user-interface": ["ui"],
}

SKILL_KEYWORDS = {
    "reactjs": ["frontend", "spa", "jsx", "hooks"],
    "react": ["frontend", "spa", "jsx", "hooks"],
    "angular": ["frontend", "spa", "typescript"],
    "vue.js": ["frontend", "spa"],
    "node.js": ["backend", "javascript", "runtime"],
    "django": ["backend", "python", "orm"],
    "flask": ["backend", "python", "microframework"],
    "fastapi": ["backend", "python", "async", "openapi"],
    "spring-boot": ["backend", "java"],
    "docker": ["containers", "devops"],
    "kubernetes": ["containers", "orchestration", "devops"],
    "terraform": ["iac", "infrastructure as code"],
    "amazon-web-services": ["cloud"],
    "azure": ["cloud"],
    "google-cloud-platform": ["cloud"],
    "postgresql": ["sql", "relational"],
    "mysql": ["sql", "relational"],
    "mongodb": ["nosql", "document"],
    "redis": ["cache", "nosql", "key-value"],
    "tensorflow": ["ai", "deep learning", "neural networks"],
    "pytorch": ["ai", "deep learning", "neural networks"],
    "pandas": ["dataframe", "python", "analysis"],
    "machine-learning": ["ai"],
    "figma": ["prototyping", "ui"],
    "selenium": ["e2e", "browser automation"],
    "cypress": ["e2e", "javascript"],
    "git": ["version control", "vcs"],
}

# Tags that are never skills: generic programming concepts, meta tags, and
# things too broad to be useful in a catalog.
SKIP_TAGS = frozenset({
    "arrays", "string", "list", "dictionary", "loops", "for-loop", "if-statement",
    "function", "class", "object", "variables", "datetime", "date", "sorting",
    "algorithm", "performance", "debugging", "exception", "error-handling",
    "file", "image", "dataframe", "regex", "json", "xml", "csv", "html", "css",
    "sql", "database", "windows", "macos", "ubuntu", "api", "web", "forms",
    "ajax", "http", "authentication", "multithreading", "asynchronous", "recursion",
    "pointers", "struct", "templates", "generics", "inheritance", "unicode",
    "parsing", "validation", "logging", "events", "dom", "url", "selenium-chromedriver",
    "visual-studio-2010", "visual-studio-2012", "visual-studio-2013", "eclipse-plugin",
    "homework", "beginner", "syntax", "compiler-errors", "runtime-error",
    "google-chrome", "firefox", "internet-explorer", "browser", "excel-formula",
    "vba", "ms-access", "import", "math", "matrix", "random", "optimization",
})

# Tags for languages owned by the Linguist stage; kept out of skills.
PROGRAMMING_LANGUAGE_TAGS = frozenset({
    "javascript", "python", "java", "c#", "php", "c++", "c", "typescript",
    "ruby", "swift", "objective-c", "kotlin", "go", "rust", "scala", "r",
    "perl", "haskell", "lua", "dart", "elixir", "erlang", "clojure", "f#",
    "groovy", "julia", "matlab", "fortran", "cobol", "assembly", "vb.net",
    "vba", "delphi", "shell", "sh", "ocaml", "lisp", "scheme", "prolog",
    "solidity", "bash", "powershell", "zig", "nim", "crystal", "python-3.x", "python-2.7",
    "java-8", "ecmascript-6", "c++11", "c++17", "swift3", "kotlin-coroutines",
})


# ---------------------------------------------------------------------------
# Programming language data (keyed by Linguist display name)
# ---------------------------------------------------------------------------

# Most popular first; popularity = 1000 - index.
LANGUAGE_POPULARITY_ORDER = (
    "JavaScript",
    "Python",
    "TypeScript",
    "Java",
    "C#",
    "C++",
    "PHP",
    "Go",
    "C",
    "Rust",
    "Kotlin",
    "Swift",
    "Ruby",
    "Dart",
    "Scala",
    "R",
    "Shell",
    "PowerShell",
    "Lua",
    "Elixir",
    "Objective-C",
    "Haskell",
    "Perl",
    "Julia",
    "Clojure",
    "F#",
    "Groovy",
    "Erlang",
    "Visual Basic .NET",
    "MATLAB",
    "Zig",
    "OCaml",
    "Fortran",
    "COBOL",
    "Assembly",
    "Solidity",
)

LANGUAGE_TRANSLATIONS = {
    "Assembly": "Assembly",
    "Shell": "Shell",
    "Visual Basic .NET": "Visual Basic .NET",
    "Common Lisp": "Common Lisp",
    "Pascal": "Pascal",
}

LANGUAGE_PARADIGMS = {
    "JavaScript": ["multi-paradigm", "functional", "object-oriented", "event-driven"],
    "Python": ["multi-paradigm", "object-oriented", "functional", "procedural"],
    "TypeScript": ["multi-paradigm", "object-oriented", "functional"],
    "Java": ["object-oriented", "imperative"],
    "C#": ["multi-paradigm", "object-oriented", "functional"],
    "C++": ["multi-paradigm", "object-oriented", "procedural", "generic"],
    "PHP": ["multi-paradigm", "object-oriented", "procedural"],
    "Go": ["concurrent", "imperative", "procedural"],
    "C": ["procedural", "imperative"],
    "Rust": ["multi-paradigm", "functional", "imperative", "concurrent"],
    "Kotlin": ["multi-paradigm", "object-oriented", "functional"],
    "Swift": ["multi-paradigm", "object-oriented", "functional", "protocol-oriented"],
    "Ruby": ["multi-paradigm", "object-oriented", "functional"],
    "Dart": ["object-oriented", "functional"],
    "Scala": ["multi-paradigm", "functional", "object-oriented"],
    "R": ["functional", "procedural"],
    "Shell": ["procedural", "scripting"],
    "Lua": ["multi-paradigm", "scripting", "procedural"],
    "Elixir": ["functional", "concurrent"],
    "Haskell": ["functional", "lazy"],
    "Clojure": ["functional", "lisp"],
    "F#": ["functional", "object-oriented"],
    "Erlang": ["functional", "concurrent"],
    "Julia": ["multi-paradigm", "functional", "procedural"],
    "OCaml": ["functional", "object-oriented"],
}

LANGUAGE_TYPING = {
    "JavaScript": "dynamic",
    "Python": "dynamic",
    "TypeScript": "static",
    "Java": "static",
    "C#": "static",
    "C++": "static",
    "PHP": "dynamic",
    "Go": "static",
    "C": "static",
    "Rust": "static",
    "Kotlin": "static",
    "Swift": "static",
    "Ruby": "dynamic",
    "Dart": "static",
    "Scala": "static",
    "R": "dynamic",
    "Lua": "dynamic",
    "Elixir": "dynamic",
    "Haskell": "static",
    "Clojure": "dynamic",
    "F#": "static",
    "Erlang": "dynamic",
    "Julia": "dynamic",
    "OCaml": "static",
    "Perl": "dynamic",
}

LANGUAGE_WEBSITES = {
    "JavaScript": "https://developer.mozilla.org/docs/Web/JavaScript",
    "Python": "https://www.python.org",
    "TypeScript": "https://www.typescriptlang.org",
    "Java": "https://www.java.com",
    "C#": "https://learn.microsoft.com/dotnet/csharp",
    "C++": "https://isocpp.org",
    "PHP": "https://www.php.net",
    "Go": "https://go.dev",
    "Rust": "https://www.rust-lang.org",
    "Kotlin": "https://kotlinlang.org",
    "Swift": "https://www.swift.org",
    "Ruby": "https://www.ruby-lang.org",
    "Dart": "https://dart.dev",
    "Scala": "https://www.scala-lang.org",
    "R": "https://www.r-project.org",
    "Lua": "https://www.lua.org",
    "Elixir": "https://elixir-lang.org",
    "Haskell": "https://www.haskell.org",
    "Clojure": "https://clojure.org",
    "F#": "https://fsharp.org",
    "Erlang": "https://www.erlang.org",
    "Julia": "https://julialang.org",
    "Zig": "https://ziglang.org",
    "OCaml": "https://ocaml.org",
}


# ---------------------------------------------------------------------------
# Frozen table bundle
# ---------------------------------------------------------------------------

def merge_first_wins(*maps: Mapping) -> dict:
    """Union of maps in order; on a duplicate key the earlier map's value stays."""
    merged: dict = {}
    for m in maps:
        for key, value in m.items():
            if key not in merged:
                merged[key] = value
    return merged


def _freeze(mapping: Mapping) -> Mapping:
    return MappingProxyType(
        {k: tuple(v) if isinstance(v, list) else v for k, v in mapping.items()}
    )


@dataclass(frozen=True)
class CatalogTables:
    skill_categories: Mapping
    skill_display_names: Mapping
    skill_translations: Mapping
    skill_colors: Mapping
    skill_aliases: Mapping
    skill_keywords: Mapping
    skip_tags: frozenset
    programming_language_tags: frozenset
    language_translations: Mapping
    language_paradigms: Mapping
    language_typing: Mapping
    language_websites: Mapping
    language_popularity_order: tuple


def build_catalog_tables(category_submaps=CATEGORY_SUBMAPS) -> CatalogTables:
    return CatalogTables(
        skill_categories=_freeze(merge_first_wins(*category_submaps)),
        skill_display_names=_freeze(SKILL_DISPLAY_NAMES),
        skill_translations=_freeze(SKILL_TRANSLATIONS),
        skill_colors=_freeze(SKILL_COLORS),
        skill_aliases=_freeze(SKILL_ALIASES),
        skill_keywords=_freeze(SKILL_KEYWORDS),
        skip_tags=SKIP_TAGS,
        programming_language_tags=PROGRAMMING_LANGUAGE_TAGS,
        language_translations=_freeze(LANGUAGE_TRANSLATIONS),
        language_paradigms=_freeze(LANGUAGE_PARADIGMS),
        language_typing=_freeze(LANGUAGE_TYPING),
        language_websites=_freeze(LANGUAGE_WEBSITES),
        language_popularity_order=tuple(LANGUAGE_POPULARITY_ORDER),
    )


DEFAULT_TABLES = build_catalog_tables()
