"""
Sample newspapers and articles for development and demos.

``seed_database`` only writes when the newspapers table is empty, so it is
safe to run on every startup (``SEED_ON_STARTUP``).
"""
import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from articles_api.models import Article, Newspaper

logger = logging.getLogger(__name__)

NEWSPAPERS = [
    # name, description, publisher, domain, founded, created days ago
    ("Tech Daily", "Leading technology news and insights for developers and IT professionals",
     "Tech Media Group", "techdaily.com", (2018, 3, 15), 30),
    ("Business Weekly", "Comprehensive business news, market analysis, and economic insights",
     "Business Publications Ltd", "businessweekly.com", (2015, 7, 22), 25),
    ("Science Today", "Latest scientific discoveries, research breakthroughs, and innovation news",
     "Science Media Network", "sciencetoday.com", (2020, 1, 10), 20),
    ("Sports Central", "Comprehensive sports coverage, analysis, and athlete interviews",
     "Sports Network International", "sportscentral.com", (2016, 11, 8), 15),
    ("Health & Wellness", "Medical research, health tips, and wellness lifestyle guidance",
     "Health Media Group", "healthwellness.com", (2019, 5, 12), 10),
]

ARTICLES = [
    {
        "title": "Getting Started with FastAPI",
        "description": "A comprehensive guide to building modern web APIs with FastAPI",
        "content": "FastAPI combines Python type hints with async request handling to build fast, "
        "well-documented APIs. This article covers project setup, routing, dependency injection, "
        "and best practices for building scalable web applications.",
        "tags": "FastAPI,Web Development,Python,APIs",
        "author": "John Smith",
        "age": timedelta(days=10),
        "is_published": True,
        "view_count": 1250,
        "newspaper": "Tech Daily",
    },
    {
        "title": "SQLAlchemy Best Practices",
        "description": "Learn the best practices for using SQLAlchemy in production applications",
        "content": "SQLAlchemy is the most widely used object-relational mapper for Python. This article "
        "discusses query efficiency, eager loading strategies, session lifecycle, and common "
        "pitfalls to avoid when building data access layers that scale with your application.",
        "tags": "SQLAlchemy,Database,ORM,Performance",
        "author": "Sarah Johnson",
        "age": timedelta(days=8),
        "is_published": True,
        "view_count": 890,
        "newspaper": "Tech Daily",
    },
    {
        "title": "Microservices Architecture with Python",
        "description": "Exploring microservices architecture and implementation strategies in Python",
        "content": "Microservices architecture builds applications as a collection of loosely coupled, "
        "independently deployable services. This article covers communication patterns, deployment "
        "strategies, and running Python services on Docker and Kubernetes.",
        "tags": "Microservices,Architecture,Python,Docker",
        "author": "David Wilson",
        "age": timedelta(days=2),
        "is_published": False,
        "view_count": 0,
        "newspaper": "Tech Daily",
    },
    {
        "title": "The Future of Digital Banking",
        "description": "How technology is transforming the banking industry and customer experience",
        "content": "Digital banking is revolutionizing how financial institutions operate and serve their "
        "customers. This article explores mobile banking, blockchain technology, AI-powered financial "
        "services, and the impact of digital transformation on traditional banking models.",
        "tags": "Banking,Fintech,Digital Transformation,Technology",
        "author": "Emily Davis",
        "age": timedelta(days=12),
        "is_published": True,
        "view_count": 2100,
        "newspaper": "Business Weekly",
    },
    {
        "title": "Sustainable Business Practices",
        "description": "Implementing eco-friendly strategies for long-term business success",
        "content": "Sustainability is no longer optional for businesses. This article examines green "
        "supply chains, renewable energy adoption, waste reduction strategies, and how sustainability "
        "initiatives can enhance brand reputation and customer loyalty.",
        "tags": "Sustainability,Business Strategy,Environment,CSR",
        "author": "Michael Brown",
        "age": timedelta(days=6),
        "is_published": True,
        "view_count": 750,
        "newspaper": "Business Weekly",
    },
    {
        "title": "Breakthrough in Quantum Computing",
        "description": "Recent advances in quantum computing technology and its potential applications",
        "content": "Quantum computing represents the next frontier in computational technology. This "
        "article discusses improved qubit stability, error correction methods, and potential "
        "applications in cryptography, drug discovery, and complex optimization problems.",
        "tags": "Quantum Computing,Technology,Research,Innovation",
        "author": "Dr. Lisa Anderson",
        "age": timedelta(days=15),
        "is_published": True,
        "view_count": 3200,
        "newspaper": "Science Today",
    },
    {
        "title": "Climate Change Research Update",
        "description": "Latest findings in climate science and environmental research",
        "content": "Climate change research continues to reveal new insights about our planet's changing "
        "environment. This article presents temperature trends, sea level rise data, and the "
        "effectiveness of various mitigation strategies.",
        "tags": "Climate Change,Environment,Research,Science",
        "author": "Dr. Robert Taylor",
        "age": timedelta(days=4),
        "is_published": True,
        "view_count": 1800,
        "newspaper": "Science Today",
    },
    {
        "title": "The Evolution of Sports Analytics",
        "description": "How data science is transforming sports performance and strategy",
        "content": "Sports analytics has changed how teams analyze performance, develop strategies, and "
        "make decisions. This article explores player tracking technology, performance metrics, and "
        "how data-driven insights are changing the game across all major sports.",
        "tags": "Sports Analytics,Data Science,Performance,Technology",
        "author": "Jennifer Martinez",
        "age": timedelta(days=7),
        "is_published": True,
        "view_count": 950,
        "newspaper": "Sports Central",
    },
    {
        "title": "Mental Health in Professional Sports",
        "description": "Addressing the psychological challenges faced by professional athletes",
        "content": "Mental health awareness in professional sports has gained significant attention in "
        "recent years. This article examines the psychological challenges faced by athletes and how "
        "sports organizations are implementing programs to support athlete well-being.",
        "tags": "Mental Health,Sports Psychology,Athletes,Wellness",
        "author": "Dr. Sarah Williams",
        "age": timedelta(days=3),
        "is_published": True,
        "view_count": 680,
        "newspaper": "Sports Central",
    },
    {
        "title": "Advances in Personalized Medicine",
        "description": "How genetic testing and AI are revolutionizing healthcare",
        "content": "Personalized medicine tailors treatment to individual genetic profiles and health "
        "characteristics. This article explores recent advances in genetic testing, AI-powered "
        "diagnostics, and how personalized medicine is improving patient outcomes.",
        "tags": "Personalized Medicine,Healthcare,Genetics,AI",
        "author": "Dr. James Chen",
        "age": timedelta(days=9),
        "is_published": True,
        "view_count": 1450,
        "newspaper": "Health & Wellness",
    },
    {
        "title": "The Science of Sleep Optimization",
        "description": "Research-backed strategies for improving sleep quality and health",
        "content": "Quality sleep is fundamental to overall health and well-being. This article examines "
        "the latest research on circadian rhythm optimization, sleep hygiene practices, and how "
        "technology can help improve sleep quality.",
        "tags": "Sleep,Health,Wellness,Research",
        "author": "Dr. Amanda Rodriguez",
        "age": timedelta(days=5),
        "is_published": True,
        "view_count": 1120,
        "newspaper": "Health & Wellness",
    },
    {
        "title": "Database Design Principles",
        "description": "Essential principles for designing efficient and scalable databases",
        "content": "Good database design is crucial for application performance and maintainability. "
        "This article covers normalization, indexing strategies, relationship design, and schemas "
        "that can handle growth and change.",
        "tags": "Database Design,SQL,Performance,Architecture",
        "author": "Robert Taylor",
        "age": timedelta(hours=12),
        "is_published": True,
        "view_count": 180,
        "newspaper": None,
    },
    {
        "title": "Testing Strategies for Python Applications",
        "description": "Comprehensive guide to testing Python applications with pytest",
        "content": "Testing ensures code quality and reduces bugs. This article covers unit testing with "
        "pytest, fixtures, integration testing against real databases, and automated testing "
        "approaches that keep a codebase maintainable.",
        "tags": "Testing,Unit Tests,Integration Tests,Python",
        "author": "Jennifer Martinez",
        "age": timedelta(hours=6),
        "is_published": True,
        "view_count": 95,
        "newspaper": None,
    },
]


async def seed_database(session: AsyncSession) -> bool:
    """Insert the sample data unless newspapers already exist.  Returns True when rows were written."""
    existing = await session.scalar(select(func.count()).select_from(Newspaper))
    if existing:
        logger.info("Newspapers already seeded (%d rows), skipping", existing)
        return False

    now = datetime.now(timezone.utc)
    newspapers = {}
    for name, description, publisher, domain, founded, days_ago in NEWSPAPERS:
        newspapers[name] = Newspaper(
            name=name,
            description=description,
            publisher=publisher,
            website=f"https://{domain}",
            logo_url=f"https://{domain}/logo.png",
            founded_date=datetime(*founded, tzinfo=timezone.utc),
            created_at=now - timedelta(days=days_ago),
            is_active=True,
        )
    session.add_all(newspapers.values())
    await session.flush()

    for data in ARTICLES:
        data = dict(data)
        newspaper = newspapers.get(data.pop("newspaper"))
        age = data.pop("age")
        session.add(
            Article(
                **data,
                created_at=now - age,
                newspaper_id=newspaper.id if newspaper is not None else None,
            )
        )
    await session.flush()

    logger.info("Seeded %d newspapers and %d articles", len(NEWSPAPERS), len(ARTICLES))
    return True
