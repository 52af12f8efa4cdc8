# app/seed.py
"""Demo researcher pool loaded into empty stores on startup."""
from typing import List

from .schemas import ResearcherCreate

SEED_RESEARCHERS: List[ResearcherCreate] = [
    ResearcherCreate(
        name="Dr. Sarah Chen",
        email="s.chen@medresearch.edu",
        institution="Stanford Medical Center",
        keywords=["antibiotic resistance", "infectious diseases", "hospital-acquired infections", "antimicrobial stewardship"],
        description="Specializing in combating antibiotic-resistant infections in hospital settings. My research focuses on developing evidence-based prophylactic strategies for post-operative patients, particularly in cardiac surgery.",
    ),
    ResearcherCreate(
        name="Dr. Michael Rodriguez",
        email="m.rodriguez@heartinstitute.org",
        institution="Mayo Clinic Heart Institute",
        keywords=["heart failure", "cardiology", "patient readmission", "care coordination"],
        description="Expert in heart failure management with a focus on reducing 30-day readmission rates. My work includes developing comprehensive discharge planning protocols and remote monitoring systems for heart failure patients.",
    ),
    ResearcherCreate(
        name="Dr. Jennifer Kim",
        email="j.kim@telemedicine.edu",
        institution="Johns Hopkins Telemedicine Center",
        keywords=["telemedicine", "chronic pain", "rural health", "digital health"],
        description="Leading research on telemedicine interventions for underserved populations. Specialized in remote chronic pain management and developing accessible digital health solutions for rural communities.",
    ),
    ResearcherCreate(
        name="Dr. David Thompson",
        email="d.thompson@oncology.org",
        institution="MD Anderson Cancer Center",
        keywords=["oncology", "cancer treatment", "immunotherapy", "clinical trials"],
        description="Cancer research specialist focusing on novel immunotherapy approaches and patient-centered clinical trial design. Experience with treatment adherence and quality of life outcomes in cancer patients.",
    ),
    ResearcherCreate(
        name="Dr. Lisa Patel",
        email="l.patel@diabetes.edu",
        institution="Joslin Diabetes Center",
        keywords=["diabetes", "chronic disease management", "patient adherence", "behavioral health"],
        description="Research focused on improving medication adherence in patients with chronic conditions, particularly diabetes. Expertise in behavioral interventions and patient education strategies.",
    ),
    ResearcherCreate(
        name="Dr. Robert Anderson",
        email="r.anderson@surgery.org",
        institution="Cleveland Clinic",
        keywords=["surgery", "post-operative care", "infection prevention", "quality improvement"],
        description="Surgeon-scientist studying surgical site infection prevention and post-operative outcomes. Research includes developing quality improvement protocols for surgical departments.",
    ),
    ResearcherCreate(
        name="Dr. Emily Martinez",
        email="e.martinez@geriatrics.edu",
        institution="UCLA Geriatrics Institute",
        keywords=["geriatrics", "elderly care", "falls prevention", "dementia care"],
        description="Geriatrics researcher specializing in fall prevention and cognitive health in older adults. Work includes developing comprehensive care models for elderly patients with multiple comorbidities.",
    ),
    ResearcherCreate(
        name="Dr. James Wilson",
        email="j.wilson@pulmonary.org",
        institution="National Jewish Health",
        keywords=["pulmonary medicine", "COPD", "respiratory diseases", "rehabilitation"],
        description="Pulmonary disease specialist with expertise in COPD management and pulmonary rehabilitation programs. Research focuses on improving quality of life and reducing hospital readmissions in respiratory patients.",
    ),
]
