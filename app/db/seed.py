# app/db/seed.py
import logging
import time
from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.upsert import upsert
from app.models.job import Job
from app.nlp.embeddings import Embedder, embed_facets
from app.nlp.facets import job_facet_texts
from app.nlp.vectors import format_vector

logger = logging.getLogger(__name__)

SAMPLE_JOBS = [
    {
        "external_id": "fe-001",
        "title": "Frontend Engineer",
        "company": "TechCorp Inc.",
        "location": "San Francisco, CA",
        "job_type": "Full-time",
        "salary": "$120,000 - $160,000",
        "description": "Build modern web applications using React, TypeScript, and modern frontend technologies. Work with designers and backend engineers to create seamless user experiences.",
        "required_skills": ["React", "TypeScript", "JavaScript", "CSS", "HTML", "Git", "REST APIs"],
        "experience_level": "Mid-level",
        "source_url": "https://example.com/jobs/fe-001",
    },
    {
        "external_id": "be-001",
        "title": "Backend Engineer",
        "company": "DataFlow Systems",
        "location": "Remote",
        "job_type": "Full-time",
        "salary": "$130,000 - $180,000",
        "description": "Design and build scalable backend services using Node.js and Python. Work with databases, APIs, and cloud infrastructure.",
        "required_skills": ["Node.js", "Python", "PostgreSQL", "AWS", "Docker", "REST APIs", "Git"],
        "experience_level": "Senior",
        "source_url": "https://example.com/jobs/be-001",
    },
    {
        "external_id": "fs-001",
        "title": "Full Stack Developer",
        "company": "StartupXYZ",
        "location": "New York, NY",
        "job_type": "Full-time",
        "salary": "$100,000 - $150,000",
        "description": "Join our fast-growing startup to build end-to-end web applications. Work on both frontend and backend, from database design to UI implementation.",
        "required_skills": ["React", "Node.js", "TypeScript", "PostgreSQL", "AWS", "Git"],
        "experience_level": "Mid-level",
        "source_url": "https://example.com/jobs/fs-001",
    },
    {
        "external_id": "ds-001",
        "title": "Data Scientist",
        "company": "Analytics Corp",
        "location": "Boston, MA",
        "job_type": "Full-time",
        "salary": "$140,000 - $190,000",
        "description": "Apply machine learning and statistical methods to solve complex business problems. Work with large datasets and build predictive models.",
        "required_skills": ["Python", "Machine Learning", "SQL", "Statistics", "TensorFlow", "Pandas", "Data Visualization"],
        "experience_level": "Senior",
        "source_url": "https://example.com/jobs/ds-001",
    },
    {
        "external_id": "pm-001",
        "title": "Product Manager",
        "company": "Product Labs",
        "location": "Seattle, WA",
        "job_type": "Full-time",
        "salary": "$150,000 - $200,000",
        "description": "Lead product strategy and execution for our flagship product. Work with engineering, design, and marketing teams to deliver exceptional user experiences.",
        "required_skills": ["Product Strategy", "User Research", "Agile", "Data Analysis", "Communication", "Leadership"],
        "experience_level": "Senior",
        "source_url": "https://example.com/jobs/pm-001",
    },
    {
        "external_id": "ux-001",
        "title": "UX Designer",
        "company": "Design Studio",
        "location": "Los Angeles, CA",
        "job_type": "Full-time",
        "salary": "$90,000 - $130,000",
        "description": "Create beautiful and intuitive user interfaces. Conduct user research, create wireframes and prototypes, and work closely with developers.",
        "required_skills": ["Figma", "User Research", "Prototyping", "UI Design", "Design Systems", "Usability Testing"],
        "experience_level": "Mid-level",
        "source_url": "https://example.com/jobs/ux-001",
    },
    {
        "external_id": "devops-001",
        "title": "DevOps Engineer",
        "company": "CloudScale",
        "location": "Remote",
        "job_type": "Full-time",
        "salary": "$140,000 - $180,000",
        "description": "Build and maintain CI/CD pipelines, manage cloud infrastructure, and ensure system reliability and security.",
        "required_skills": ["AWS", "Kubernetes", "Docker", "Terraform", "CI/CD", "Linux", "Python"],
        "experience_level": "Senior",
        "source_url": "https://example.com/jobs/devops-001",
    },
    {
        "external_id": "ml-001",
        "title": "Machine Learning Engineer",
        "company": "AI Innovations",
        "location": "San Francisco, CA",
        "job_type": "Full-time",
        "salary": "$180,000 - $250,000",
        "description": "Build and deploy production ML models. Work on cutting-edge AI/ML projects including NLP, computer vision, and recommendation systems.",
        "required_skills": ["Python", "TensorFlow", "PyTorch", "Machine Learning", "Deep Learning", "MLOps", "SQL"],
        "experience_level": "Senior",
        "source_url": "https://example.com/jobs/ml-001",
    },
    {
        "external_id": "da-001",
        "title": "Data Analyst",
        "company": "Insights Co",
        "location": "Chicago, IL",
        "job_type": "Full-time",
        "salary": "$70,000 - $100,000",
        "description": "Analyze data to provide actionable insights for business decisions. Create dashboards and reports using modern analytics tools.",
        "required_skills": ["SQL", "Python", "Tableau", "Excel", "Statistics", "Data Visualization", "Communication"],
        "experience_level": "Entry-level",
        "source_url": "https://example.com/jobs/da-001",
    },
    {
        "external_id": "mobile-001",
        "title": "Mobile Developer",
        "company": "AppWorks",
        "location": "Austin, TX",
        "job_type": "Full-time",
        "salary": "$110,000 - $150,000",
        "description": "Build cross-platform mobile applications using React Native. Work on iOS and Android apps from conception to deployment.",
        "required_skills": ["React Native", "JavaScript", "TypeScript", "iOS", "Android", "Git", "REST APIs"],
        "experience_level": "Mid-level",
        "source_url": "https://example.com/jobs/mobile-001",
    },
]

def seed_jobs(db: Session, embedder: Embedder, catalog: list[dict] | None = None,
              delay: float | None = None) -> dict:
    # if already seeded, skip
    existing = db.execute(select(func.count()).select_from(Job)).scalar_one()
    if existing:
        logger.info("jobs already exist (%d found), skipping seed", existing)
        return {"success": True, "message": "Jobs already seeded", "skipped": True, "existingCount": existing}

    catalog = SAMPLE_JOBS if catalog is None else catalog
    delay = settings.SEED_DELAY_SECONDS if delay is None else delay
    results = []
    for entry in catalog:
        logger.info("seeding job: %s", entry["title"])
        texts = job_facet_texts(
            entry["title"], entry.get("company"), entry.get("experience_level"),
            entry.get("required_skills", []), entry.get("description"),
        )
        try:
            vectors = embed_facets(embedder, texts)
        except Exception as exc:
            logger.error("embedding error for %s: %s", entry["title"], exc)
            results.append({"job": entry["title"], "success": False, "error": str(exc)})
            continue

        upsert(db, Job, {
            **entry,
            "skills_embedding": format_vector(vectors["skills"]),
            "experience_embedding": format_vector(vectors["experience"]),
            "interests_embedding": format_vector(vectors["interests"]),
            "embedding_updated_at": datetime.now(tz=timezone.utc),
        }, keys=("external_id",))
        db.commit()
        results.append({"job": entry["title"], "success": True})

        if delay:
            time.sleep(delay)

    logger.info("job seeding completed")
    return {"success": True, "message": "Jobs seeded successfully", "results": results}
