"""Built-in skill ontology.

Each node declares its domain, category, aliases, prerequisites and related
skills. Aliases are stored lowercase; the taxonomy indexes canonical names
and IDs after aliases so a canonical name always resolves to its own node.
"""

from models.schemas.taxonomy import SkillNode

# ---------------------------------------------------------------------------
# Domains and categories
# ---------------------------------------------------------------------------
DOMAINS: tuple[str, ...] = (
    "engineering",
    "data_science",
    "devops",
    "design",
    "management",
    "communication",
    "domain_knowledge",
)

CATEGORIES: tuple[str, ...] = (
    # Engineering
    "language", "frontend", "backend", "mobile", "database", "cloud",
    "devops", "security", "testing", "api", "messaging",
    # Data science
    "ml_framework", "data_tools", "ml_concept",
    # Soft skills
    "leadership", "collaboration", "communication_skill", "problem_solving",
    "project_management",
    # Domain knowledge
    "finance", "healthcare", "ecommerce", "legal",
)

SOFT_SKILL_DOMAINS: frozenset[str] = frozenset({"management", "communication"})
DOMAIN_KNOWLEDGE_DOMAINS: frozenset[str] = frozenset({"domain_knowledge"})

BUILTIN_SKILLS: list[SkillNode] = [
    # Programming Languages
    SkillNode(
        id="go",
        canonical_name="Go",
        domain="engineering",
        category="language",
        aliases=["golang", "go lang", "go programming"],
        related_skills=["grpc", "gin", "echo", "fiber", "kubernetes"],
        description="Statically typed, compiled language designed at Google.",
    ),
    SkillNode(
        id="python",
        canonical_name="Python",
        domain="engineering",
        category="language",
        aliases=["py", "python3", "python 3", "python2", "python 2"],
        related_skills=["django", "flask", "fastapi", "pandas", "numpy", "tensorflow", "pytorch"],
        description="High-level, general-purpose programming language.",
    ),
    SkillNode(
        id="javascript",
        canonical_name="JavaScript",
        domain="engineering",
        category="language",
        aliases=["js", "ecmascript", "es6", "es2015", "es2016", "es2017", "es2018", "es2019", "es2020", "es2021", "es2022", "vanilla js", "vanilla javascript"],
        related_skills=["typescript", "react", "angular", "vue", "nodejs"],
        description="Lightweight, interpreted scripting language for the web.",
    ),
    SkillNode(
        id="typescript",
        canonical_name="TypeScript",
        domain="engineering",
        category="language",
        aliases=["ts", "typescript lang"],
        prerequisites=["javascript"],
        related_skills=["javascript", "react", "angular", "nodejs"],
        description="Strongly typed superset of JavaScript.",
    ),
    SkillNode(
        id="java",
        canonical_name="Java",
        domain="engineering",
        category="language",
        aliases=["java se", "java ee", "java 8", "java 11", "java 17", "java 21"],
        related_skills=["spring-boot"],
        description="Object-oriented, class-based programming language.",
    ),
    SkillNode(
        id="rust",
        canonical_name="Rust",
        domain="engineering",
        category="language",
        aliases=["rust lang", "rust programming"],
        related_skills=["actix"],
        description="Systems programming language focused on safety and performance.",
    ),
    SkillNode(
        id="csharp",
        canonical_name="C#",
        domain="engineering",
        category="language",
        aliases=["c#", "csharp", "c sharp", ".net c#", "dotnet c#"],
        related_skills=["dotnet"],
        description="Modern, object-oriented language for the .NET platform.",
    ),
    SkillNode(
        id="cpp",
        canonical_name="C++",
        domain="engineering",
        category="language",
        aliases=["c++", "cpp", "c plus plus", "cplusplus"],
        related_skills=["c"],
        description="General-purpose language with low-level memory manipulation.",
    ),
    SkillNode(
        id="c",
        canonical_name="C",
        domain="engineering",
        category="language",
        aliases=["c language", "c programming", "ansi c"],
        related_skills=["cpp"],
        description="General-purpose, procedural programming language.",
    ),
    SkillNode(
        id="ruby",
        canonical_name="Ruby",
        domain="engineering",
        category="language",
        aliases=["ruby lang", "ruby programming"],
        related_skills=["rails"],
        description="Dynamic, open-source programming language.",
    ),
    SkillNode(
        id="php",
        canonical_name="PHP",
        domain="engineering",
        category="language",
        aliases=["php7", "php8", "php 7", "php 8"],
        related_skills=["laravel"],
        description="Server-side scripting language for web development.",
    ),
    SkillNode(
        id="swift",
        canonical_name="Swift",
        domain="engineering",
        category="language",
        aliases=["swift lang", "swift programming", "apple swift"],
        related_skills=["ios"],
        description="General-purpose language developed by Apple.",
    ),
    SkillNode(
        id="kotlin",
        canonical_name="Kotlin",
        domain="engineering",
        category="language",
        aliases=["kotlin lang", "kotlin programming"],
        prerequisites=["java"],
        related_skills=["android", "spring-boot"],
        description="Cross-platform, statically typed language for JVM.",
    ),
    SkillNode(
        id="scala",
        canonical_name="Scala",
        domain="engineering",
        category="language",
        aliases=["scala lang"],
        related_skills=["spark"],
        description="Strong static type system language for JVM.",
    ),
    SkillNode(
        id="r",
        canonical_name="R",
        domain="data_science",
        category="language",
        aliases=["r language", "r programming", "r stats"],
        description="Language for statistical computing and graphics.",
    ),
    SkillNode(
        id="sql",
        canonical_name="SQL",
        domain="engineering",
        category="language",
        aliases=["structured query language", "ansi sql", "t-sql", "tsql", "pl/sql", "plsql"],
        related_skills=["postgresql", "mysql", "sqlite"],
        description="Domain-specific language for managing relational databases.",
    ),
    SkillNode(
        id="bash",
        canonical_name="Bash",
        domain="engineering",
        category="language",
        aliases=["shell", "shell scripting", "bash scripting", "sh", "zsh", "unix shell"],
        description="Unix shell and command language.",
    ),
    SkillNode(
        id="html",
        canonical_name="HTML",
        domain="engineering",
        category="frontend",
        aliases=["html5", "html 5", "hypertext markup language"],
        related_skills=["css", "javascript"],
        description="Standard markup language for web pages.",
    ),
    SkillNode(
        id="css",
        canonical_name="CSS",
        domain="engineering",
        category="frontend",
        aliases=["css3", "css 3", "cascading style sheets"],
        related_skills=["html", "sass", "less", "tailwind"],
        description="Style sheet language for HTML documents.",
    ),
    SkillNode(
        id="graphql",
        canonical_name="GraphQL",
        domain="engineering",
        category="api",
        aliases=["graph ql", "gql"],
        related_skills=["rest", "apollo", "hasura"],
        description="Query language for APIs.",
    ),

    # Frontend Frameworks
    SkillNode(
        id="react",
        canonical_name="React",
        domain="engineering",
        category="frontend",
        aliases=["react.js", "reactjs", "react js"],
        prerequisites=["javascript"],
        related_skills=["redux", "next.js", "typescript", "jsx"],
        description="JavaScript library for building user interfaces.",
    ),
    SkillNode(
        id="angular",
        canonical_name="Angular",
        domain="engineering",
        category="frontend",
        aliases=["angular.js", "angularjs", "angular js", "angular 2", "angular 4", "angular 8", "angular 12", "angular 14", "angular 16"],
        prerequisites=["typescript"],
        related_skills=["rxjs", "typescript", "ngrx"],
        description="TypeScript-based web application framework by Google.",
    ),
    SkillNode(
        id="vue",
        canonical_name="Vue.js",
        domain="engineering",
        category="frontend",
        aliases=["vue.js", "vuejs", "vue js", "vue 2", "vue 3", "nuxt", "nuxt.js"],
        prerequisites=["javascript"],
        related_skills=["vuex", "pinia", "typescript"],
        description="Progressive JavaScript framework for building UIs.",
    ),
    SkillNode(
        id="nextjs",
        canonical_name="Next.js",
        domain="engineering",
        category="frontend",
        aliases=["next.js", "nextjs", "next js"],
        prerequisites=["react"],
        related_skills=["react", "typescript", "vercel"],
        description="React framework for production-grade web applications.",
    ),
    SkillNode(
        id="svelte",
        canonical_name="Svelte",
        domain="engineering",
        category="frontend",
        aliases=["svelte.js", "sveltejs", "sveltekit"],
        prerequisites=["javascript"],
        description="Compiler-based JavaScript framework.",
    ),
    SkillNode(
        id="tailwind",
        canonical_name="Tailwind CSS",
        domain="engineering",
        category="frontend",
        aliases=["tailwindcss", "tailwind css"],
        prerequisites=["css"],
        description="Utility-first CSS framework.",
    ),
    SkillNode(
        id="sass",
        canonical_name="Sass",
        domain="engineering",
        category="frontend",
        aliases=["scss", "sass/scss"],
        prerequisites=["css"],
        description="CSS preprocessor scripting language.",
    ),

    # Backend Frameworks
    SkillNode(
        id="django",
        canonical_name="Django",
        domain="engineering",
        category="backend",
        aliases=["django framework", "django rest framework", "drf"],
        prerequisites=["python"],
        related_skills=["python", "postgresql", "rest"],
        description="High-level Python web framework.",
    ),
    SkillNode(
        id="flask",
        canonical_name="Flask",
        domain="engineering",
        category="backend",
        aliases=["flask framework", "flask python"],
        prerequisites=["python"],
        related_skills=["python", "sqlalchemy"],
        description="Lightweight Python web framework.",
    ),
    SkillNode(
        id="fastapi",
        canonical_name="FastAPI",
        domain="engineering",
        category="backend",
        aliases=["fast api", "fastapi framework"],
        prerequisites=["python"],
        related_skills=["python", "pydantic", "uvicorn"],
        description="Modern, fast Python web framework for building APIs.",
    ),
    SkillNode(
        id="spring-boot",
        canonical_name="Spring Boot",
        domain="engineering",
        category="backend",
        aliases=["spring boot", "springboot", "spring framework", "spring"],
        prerequisites=["java"],
        related_skills=["java", "maven", "gradle", "hibernate"],
        description="Java-based framework for building microservices.",
    ),
    SkillNode(
        id="nodejs",
        canonical_name="Node.js",
        domain="engineering",
        category="backend",
        aliases=["node.js", "nodejs", "node js", "node"],
        prerequisites=["javascript"],
        related_skills=["express", "nestjs", "typescript"],
        description="JavaScript runtime built on Chrome's V8 engine.",
    ),
    SkillNode(
        id="express",
        canonical_name="Express.js",
        domain="engineering",
        category="backend",
        aliases=["express.js", "expressjs", "express js", "express framework"],
        prerequisites=["nodejs"],
        description="Minimal and flexible Node.js web application framework.",
    ),
    SkillNode(
        id="nestjs",
        canonical_name="NestJS",
        domain="engineering",
        category="backend",
        aliases=["nest.js", "nestjs", "nest js"],
        prerequisites=["nodejs", "typescript"],
        description="Progressive Node.js framework for scalable server-side apps.",
    ),
    SkillNode(
        id="rails",
        canonical_name="Ruby on Rails",
        domain="engineering",
        category="backend",
        aliases=["ruby on rails", "rails", "ror"],
        prerequisites=["ruby"],
        description="Server-side web application framework written in Ruby.",
    ),
    SkillNode(
        id="laravel",
        canonical_name="Laravel",
        domain="engineering",
        category="backend",
        aliases=["laravel framework", "laravel php"],
        prerequisites=["php"],
        description="PHP web application framework.",
    ),
    SkillNode(
        id="gin",
        canonical_name="Gin",
        domain="engineering",
        category="backend",
        aliases=["gin framework", "gin-gonic"],
        prerequisites=["go"],
        description="HTTP web framework written in Go.",
    ),
    SkillNode(
        id="echo",
        canonical_name="Echo",
        domain="engineering",
        category="backend",
        aliases=["echo framework", "echo go"],
        prerequisites=["go"],
        description="High performance, minimalist Go web framework.",
    ),
    SkillNode(
        id="fiber",
        canonical_name="Fiber",
        domain="engineering",
        category="backend",
        aliases=["fiber framework", "gofiber"],
        prerequisites=["go"],
        description="Express-inspired web framework written in Go.",
    ),
    SkillNode(
        id="actix",
        canonical_name="Actix",
        domain="engineering",
        category="backend",
        aliases=["actix-web", "actix web"],
        prerequisites=["rust"],
        description="Powerful, pragmatic, and extremely fast Rust web framework.",
    ),
    SkillNode(
        id="dotnet",
        canonical_name=".NET",
        domain="engineering",
        category="backend",
        aliases=[".net", "dotnet", "asp.net", "asp.net core", "aspnet", ".net core", "dotnet core"],
        prerequisites=["csharp"],
        description="Free, cross-platform, open-source developer platform.",
    ),

    # Mobile
    SkillNode(
        id="ios",
        canonical_name="iOS Development",
        domain="engineering",
        category="mobile",
        aliases=["ios development", "ios dev", "iphone development"],
        prerequisites=["swift"],
        related_skills=["swift", "xcode", "objective-c"],
        description="Development for Apple iOS platform.",
    ),
    SkillNode(
        id="android",
        canonical_name="Android Development",
        domain="engineering",
        category="mobile",
        aliases=["android development", "android dev"],
        prerequisites=["kotlin"],
        related_skills=["kotlin", "java", "android studio"],
        description="Development for Google Android platform.",
    ),
    SkillNode(
        id="flutter",
        canonical_name="Flutter",
        domain="engineering",
        category="mobile",
        aliases=["flutter sdk", "flutter framework"],
        related_skills=["dart", "ios", "android"],
        description="Google's UI toolkit for cross-platform apps.",
    ),
    SkillNode(
        id="react-native",
        canonical_name="React Native",
        domain="engineering",
        category="mobile",
        aliases=["react native", "reactnative", "rn"],
        prerequisites=["react"],
        description="Framework for building native apps using React.",
    ),

    # Databases
    SkillNode(
        id="postgresql",
        canonical_name="PostgreSQL",
        domain="engineering",
        category="database",
        aliases=["postgres", "psql", "pg", "postgresql database"],
        prerequisites=["sql"],
        description="Advanced open-source relational database.",
    ),
    SkillNode(
        id="mysql",
        canonical_name="MySQL",
        domain="engineering",
        category="database",
        aliases=["mysql database", "mysql server"],
        prerequisites=["sql"],
        description="Open-source relational database management system.",
    ),
    SkillNode(
        id="mongodb",
        canonical_name="MongoDB",
        domain="engineering",
        category="database",
        aliases=["mongo", "mongo db", "mongodb database"],
        description="Document-oriented NoSQL database.",
    ),
    SkillNode(
        id="redis",
        canonical_name="Redis",
        domain="engineering",
        category="database",
        aliases=["redis cache", "redis db"],
        description="In-memory data structure store.",
    ),
    SkillNode(
        id="elasticsearch",
        canonical_name="Elasticsearch",
        domain="engineering",
        category="database",
        aliases=["elastic search", "elastic", "es", "opensearch"],
        description="Distributed, RESTful search and analytics engine.",
    ),
    SkillNode(
        id="cassandra",
        canonical_name="Cassandra",
        domain="engineering",
        category="database",
        aliases=["apache cassandra", "cassandra db"],
        description="Distributed NoSQL database for high availability.",
    ),
    SkillNode(
        id="dynamodb",
        canonical_name="DynamoDB",
        domain="engineering",
        category="database",
        aliases=["dynamo db", "aws dynamodb", "amazon dynamodb"],
        description="AWS managed NoSQL database service.",
    ),
    SkillNode(
        id="sqlite",
        canonical_name="SQLite",
        domain="engineering",
        category="database",
        aliases=["sqlite3", "sqlite database"],
        prerequisites=["sql"],
        description="Lightweight, file-based relational database.",
    ),
    SkillNode(
        id="neo4j",
        canonical_name="Neo4j",
        domain="engineering",
        category="database",
        aliases=["neo4j database", "graph database"],
        description="Graph database management system.",
    ),
    SkillNode(
        id="pinecone",
        canonical_name="Pinecone",
        domain="data_science",
        category="database",
        aliases=["pinecone db", "pinecone vector"],
        description="Managed vector database for ML applications.",
    ),
    SkillNode(
        id="weaviate",
        canonical_name="Weaviate",
        domain="data_science",
        category="database",
        aliases=["weaviate db"],
        description="Open-source vector database.",
    ),
    SkillNode(
        id="qdrant",
        canonical_name="Qdrant",
        domain="data_science",
        category="database",
        aliases=["qdrant db"],
        description="Vector similarity search engine.",
    ),

    # Cloud Platforms
    SkillNode(
        id="aws",
        canonical_name="AWS",
        domain="devops",
        category="cloud",
        aliases=["amazon web services", "amazon aws", "aws cloud"],
        related_skills=["ec2", "s3", "lambda", "rds", "dynamodb", "ecs", "eks"],
        description="Amazon Web Services cloud platform.",
    ),
    SkillNode(
        id="azure",
        canonical_name="Azure",
        domain="devops",
        category="cloud",
        aliases=["microsoft azure", "azure cloud", "ms azure"],
        description="Microsoft Azure cloud platform.",
    ),
    SkillNode(
        id="gcp",
        canonical_name="GCP",
        domain="devops",
        category="cloud",
        aliases=["google cloud", "google cloud platform", "google cloud services"],
        description="Google Cloud Platform.",
    ),

    # DevOps & Infrastructure
    SkillNode(
        id="docker",
        canonical_name="Docker",
        domain="devops",
        category="devops",
        aliases=["docker container", "docker compose", "dockerfile"],
        related_skills=["kubernetes", "containerization"],
        description="Platform for developing, shipping, and running containers.",
    ),
    SkillNode(
        id="kubernetes",
        canonical_name="Kubernetes",
        domain="devops",
        category="devops",
        aliases=["k8s", "kube", "k8", "kubernetes orchestration"],
        prerequisites=["docker"],
        related_skills=["helm", "istio", "docker"],
        description="Container orchestration system.",
    ),
    SkillNode(
        id="terraform",
        canonical_name="Terraform",
        domain="devops",
        category="devops",
        aliases=["terraform iac", "hashicorp terraform"],
        description="Infrastructure as code tool.",
    ),
    SkillNode(
        id="ansible",
        canonical_name="Ansible",
        domain="devops",
        category="devops",
        aliases=["ansible automation", "red hat ansible"],
        description="IT automation platform.",
    ),
    SkillNode(
        id="jenkins",
        canonical_name="Jenkins",
        domain="devops",
        category="devops",
        aliases=["jenkins ci", "jenkins pipeline"],
        description="Open-source automation server for CI/CD.",
    ),
    SkillNode(
        id="github-actions",
        canonical_name="GitHub Actions",
        domain="devops",
        category="devops",
        aliases=["github actions", "gh actions", "github ci"],
        description="CI/CD platform integrated with GitHub.",
    ),
    SkillNode(
        id="gitlab-ci",
        canonical_name="GitLab CI/CD",
        domain="devops",
        category="devops",
        aliases=["gitlab ci", "gitlab ci/cd", "gitlab pipeline"],
        description="CI/CD platform integrated with GitLab.",
    ),
    SkillNode(
        id="helm",
        canonical_name="Helm",
        domain="devops",
        category="devops",
        aliases=["helm chart", "helm charts"],
        prerequisites=["kubernetes"],
        description="Package manager for Kubernetes.",
    ),
    SkillNode(
        id="prometheus",
        canonical_name="Prometheus",
        domain="devops",
        category="devops",
        aliases=["prometheus monitoring"],
        related_skills=["grafana"],
        description="Open-source monitoring and alerting toolkit.",
    ),
    SkillNode(
        id="grafana",
        canonical_name="Grafana",
        domain="devops",
        category="devops",
        aliases=["grafana dashboard"],
        related_skills=["prometheus"],
        description="Open-source analytics and monitoring platform.",
    ),
    SkillNode(
        id="git",
        canonical_name="Git",
        domain="engineering",
        category="devops",
        aliases=["git version control", "git scm"],
        related_skills=["github", "gitlab", "bitbucket"],
        description="Distributed version control system.",
    ),
    SkillNode(
        id="cicd",
        canonical_name="CI/CD",
        domain="devops",
        category="devops",
        aliases=["ci/cd", "continuous integration", "continuous delivery", "continuous deployment", "ci cd", "cicd pipeline"],
        description="Continuous integration and continuous delivery practices.",
    ),

    # API & Messaging
    SkillNode(
        id="rest",
        canonical_name="REST",
        domain="engineering",
        category="api",
        aliases=["restful", "rest api", "restful api", "rest apis", "restful apis", "rest services", "restful services"],
        description="Representational State Transfer architectural style.",
    ),
    SkillNode(
        id="grpc",
        canonical_name="gRPC",
        domain="engineering",
        category="api",
        aliases=["grpc", "google rpc", "protocol buffers", "protobuf"],
        description="High-performance RPC framework.",
    ),
    SkillNode(
        id="kafka",
        canonical_name="Apache Kafka",
        domain="engineering",
        category="messaging",
        aliases=["kafka", "apache kafka", "kafka streaming"],
        description="Distributed event streaming platform.",
    ),
    SkillNode(
        id="rabbitmq",
        canonical_name="RabbitMQ",
        domain="engineering",
        category="messaging",
        aliases=["rabbit mq", "amqp"],
        description="Open-source message broker.",
    ),

    # ML / Data Science Frameworks
    SkillNode(
        id="tensorflow",
        canonical_name="TensorFlow",
        domain="data_science",
        category="ml_framework",
        aliases=["tensor flow", "tf", "tensorflow 2", "tensorflow2"],
        prerequisites=["python"],
        related_skills=["keras", "python", "deep-learning"],
        description="Open-source machine learning framework by Google.",
    ),
    SkillNode(
        id="pytorch",
        canonical_name="PyTorch",
        domain="data_science",
        category="ml_framework",
        aliases=["py torch", "torch", "pytorch framework"],
        prerequisites=["python"],
        related_skills=["python", "deep-learning"],
        description="Open-source machine learning framework by Meta.",
    ),
    SkillNode(
        id="keras",
        canonical_name="Keras",
        domain="data_science",
        category="ml_framework",
        aliases=["keras api"],
        prerequisites=["tensorflow"],
        description="High-level neural networks API.",
    ),
    SkillNode(
        id="scikit-learn",
        canonical_name="scikit-learn",
        domain="data_science",
        category="ml_framework",
        aliases=["sklearn", "scikit learn", "scikitlearn"],
        prerequisites=["python"],
        description="Machine learning library for Python.",
    ),
    SkillNode(
        id="pandas",
        canonical_name="Pandas",
        domain="data_science",
        category="data_tools",
        aliases=["pandas library", "pandas dataframe"],
        prerequisites=["python"],
        description="Data analysis and manipulation library for Python.",
    ),
    SkillNode(
        id="numpy",
        canonical_name="NumPy",
        domain="data_science",
        category="data_tools",
        aliases=["numpy library", "np"],
        prerequisites=["python"],
        description="Fundamental package for scientific computing in Python.",
    ),
    SkillNode(
        id="spark",
        canonical_name="Apache Spark",
        domain="data_science",
        category="data_tools",
        aliases=["apache spark", "pyspark", "spark streaming"],
        description="Unified analytics engine for large-scale data processing.",
    ),
    SkillNode(
        id="machine-learning",
        canonical_name="Machine Learning",
        domain="data_science",
        category="ml_concept",
        aliases=["ml", "machine learning", "supervised learning", "unsupervised learning"],
        description="Field of AI that enables systems to learn from data.",
    ),
    SkillNode(
        id="deep-learning",
        canonical_name="Deep Learning",
        domain="data_science",
        category="ml_concept",
        aliases=["dl", "deep learning", "neural networks", "neural network"],
        prerequisites=["machine-learning"],
        description="Subset of ML using multi-layered neural networks.",
    ),
    SkillNode(
        id="nlp",
        canonical_name="NLP",
        domain="data_science",
        category="ml_concept",
        aliases=["natural language processing", "text mining", "text analytics", "computational linguistics"],
        prerequisites=["machine-learning"],
        description="AI field focused on interaction between computers and human language.",
    ),
    SkillNode(
        id="llm",
        canonical_name="LLM",
        domain="data_science",
        category="ml_concept",
        aliases=["large language model", "large language models", "llms", "gpt", "chatgpt", "openai"],
        prerequisites=["deep-learning", "nlp"],
        description="Large language models for natural language tasks.",
    ),
    SkillNode(
        id="rag",
        canonical_name="RAG",
        domain="data_science",
        category="ml_concept",
        aliases=["retrieval augmented generation", "retrieval-augmented generation"],
        prerequisites=["llm"],
        description="Retrieval-Augmented Generation for LLM applications.",
    ),

    # Soft Skills
    SkillNode(
        id="leadership",
        canonical_name="Leadership",
        domain="management",
        category="leadership",
        aliases=["team leadership", "technical leadership", "tech lead", "engineering leadership"],
        description="Ability to guide and inspire a team.",
    ),
    SkillNode(
        id="communication",
        canonical_name="Communication",
        domain="communication",
        category="communication_skill",
        aliases=["verbal communication", "written communication", "interpersonal communication", "effective communication"],
        description="Ability to convey information clearly and effectively.",
    ),
    SkillNode(
        id="teamwork",
        canonical_name="Teamwork",
        domain="communication",
        category="collaboration",
        aliases=["team player", "collaboration", "collaborative", "cross-functional collaboration"],
        description="Ability to work effectively in a team.",
    ),
    SkillNode(
        id="problem-solving",
        canonical_name="Problem Solving",
        domain="management",
        category="problem_solving",
        aliases=["problem solving", "analytical thinking", "critical thinking", "analytical skills"],
        description="Ability to identify and resolve complex problems.",
    ),
    SkillNode(
        id="project-management",
        canonical_name="Project Management",
        domain="management",
        category="project_management",
        aliases=["project management", "program management", "pmp", "agile project management"],
        description="Planning, executing, and closing projects.",
    ),
    SkillNode(
        id="agile",
        canonical_name="Agile",
        domain="management",
        category="project_management",
        aliases=["agile methodology", "agile development", "scrum", "kanban", "sprint", "agile scrum"],
        description="Iterative approach to project management and software development.",
    ),
    SkillNode(
        id="mentoring",
        canonical_name="Mentoring",
        domain="management",
        category="leadership",
        aliases=["mentorship", "coaching", "staff development"],
        description="Guiding and developing junior team members.",
    ),
    SkillNode(
        id="stakeholder-management",
        canonical_name="Stakeholder Management",
        domain="management",
        category="project_management",
        aliases=["stakeholder management", "stakeholder communication", "executive communication"],
        description="Managing relationships with project stakeholders.",
    ),
]
