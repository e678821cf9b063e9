"""
Script to insert the default job catalogue.

Jobs whose title already exists are skipped, so it is safe to run repeatedly.

Run this script from the project root:
    python seed_jobs.py
"""

import os
import sys

# Add app to Python path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from app.core.database import SessionLocal
from app.crud import job as job_crud
from app.schemas.job import JobCreateRequest

DEFAULT_JOBS = [
    {
        "title": "Mobile Developer",
        "description": "Develop mobile applications for iOS and Android platforms using modern frameworks and best practices.",
        "experience": "1-2 years",
        "skills": ["React Native", "Flutter", "Swift", "Kotlin", "Mobile UI/UX"],
    },
    {
        "title": "Python Developer",
        "description": "Backend development using Python frameworks, building scalable APIs and microservices.",
        "experience": "1-2 years",
        "skills": ["Python", "Django", "Flask", "FastAPI", "PostgreSQL", "REST APIs"],
    },
    {
        "title": "AWS Expert",
        "description": "Cloud infrastructure and DevOps specialist managing AWS services and deployments.",
        "experience": "1-2 years",
        "skills": ["AWS", "EC2", "S3", "Lambda", "CloudFormation", "Docker", "Kubernetes"],
    },
    {
        "title": "Social Media Manager",
        "description": "Manage social media presence and campaigns across multiple platforms to drive engagement.",
        "experience": "1-2 years",
        "skills": ["Content Creation", "Analytics", "Social Media Strategy", "Community Management"],
    },
    {
        "title": "UX/UI Designer",
        "description": "Design user interfaces and experiences for web and mobile applications with focus on usability.",
        "experience": "1-2 years",
        "skills": ["Figma", "Adobe XD", "Prototyping", "User Research", "Wireframing"],
    },
    {
        "title": "Pre-Sales Specialist",
        "description": "Technical sales and client engagement, presenting solutions and supporting the sales process.",
        "experience": "1-2 years",
        "skills": ["Sales", "Technical Presentation", "Client Relations", "Solution Architecture"],
    },
    {
        "title": "AI Consultant",
        "description": "AI strategy and implementation consulting, helping clients leverage machine learning and AI technologies.",
        "experience": "1-2 years",
        "skills": ["Machine Learning", "AI Strategy", "Data Science", "Python", "TensorFlow", "PyTorch"],
    },
]


def seed_jobs(db, jobs=DEFAULT_JOBS):
    """
    Insert every job in `jobs` whose title is not already present.

    Returns:
        Tuple of (created, skipped) counts
    """
    created = 0
    skipped = 0

    for job_data in jobs:
        if job_crud.get_by_title(db, job_data["title"]):
            print(f"  - Skipped (exists): {job_data['title']}")
            skipped += 1
            continue

        job_crud.create(db, JobCreateRequest(**job_data))
        print(f"  ✓ Created job: {job_data['title']}")
        created += 1

    return created, skipped


if __name__ == "__main__":
    print("Starting seed process...")
    db = SessionLocal()
    try:
        created, skipped = seed_jobs(db)
        print(f"\nSeed process completed: {created} created, {skipped} skipped")
    except Exception as e:
        db.rollback()
        print(f"\n❌ Seed failed: {e}")
        sys.exit(1)
    finally:
        db.close()
