import copy
import json
import random
import sys
from datetime import date
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pharmacv.ids import IdGenerator


NOW = date(2024, 3, 1)

SAMPLE_PROFILE = {
    "first_name": "Marie",
    "last_name": "Durand",
    "nickname": "",
    "current_city": "Lyon",
    "current_region": "Auvergne-Rhône-Alpes",
    "photo_url": "https://cdn.example.com/marie.jpg",
    "phone": "06 99 88 77 66",
}

SAMPLE_CV = {
    "summary": "Pharmacienne passionnée, 4 ans chez Pharmacie du Centre. Écrivez à marie.durand@example.com",
    "profession_title": "Pharmacien adjoint",
    "current_city": "Lyon",
    "current_region": "Auvergne-Rhône-Alpes",
    "contact_email": "marie@example.com",
    "contact_phone": "06 11 22 33 44",
    "experiences": [
        {
            "id": "exp1",
            "job_title": "Pharmacien adjoint",
            "company_name": "Pharmacie du Centre",
            "company_type": "pharmacie_independante",
            "company_size": "medium",
            "city": "Lyon",
            "region": "Auvergne-Rhône-Alpes",
            "start_date": "2020-03",
            "end_date": None,
            "is_current": True,
            "description": "Gestion des commandes de la Pharmacie du Centre, 12 rue de la République 69002 Lyon.",
            "skills": [
                "Conseil patient",
                "Gestion des stocks",
                "Vaccination",
                "Orthopédie",
                "Préparations magistrales",
            ],
        },
        {
            "id": "exp2",
            "job_title": "Préparateur",
            "company_name": "Hôpital Édouard Herriot",
            "company_type": "pharmacie_hopital",
            "company_size": "large",
            "city": "Lyon",
            "region": "Auvergne-Rhône-Alpes",
            "start_date": "2017-09",
            "end_date": "2020-02",
            "is_current": False,
            "description": "Dispensation et préparation des doses.",
            "skills": ["Conseil patient"],
        },
    ],
    "formations": [
        {
            "id": "f1",
            "diploma_type": "docteur_pharmacie",
            "diploma_name": "",
            "school_name": "Université Lyon 1",
            "school_city": "Lyon",
            "school_region": "Auvergne-Rhône-Alpes",
            "year": 2017,
            "mention": "bien",
        }
    ],
    "skills": ["Conseil patient", "Vaccination", "Gestion des stocks"],
    "software": ["LGPI"],
    "certifications": [{"name": "Vaccination antigrippale", "year": 2021}],
    "languages": [
        {"language": "francais", "level": "native"},
        {"language": "anglais", "level": "fluent"},
    ],
}

SAMPLE_ANIMATOR_CV = {
    "cv_type": "animator",
    "summary": "Animatrice dermocosmétique depuis 6 ans.",
    "specialty_title": "Animatrice dermocosmétique",
    "current_city": "Paris",
    "current_region": "Île-de-France",
    "contact_email": "anim@example.com",
    "contact_phone": "07 00 00 00 00",
    "brands_experience": [
        {
            "id": "b1",
            "brand": "La Roche-Posay",
            "years": 6,
            "mission_count": "50+",
            "specialties": ["dermocosmetique"],
            "description": "Animations en officine.",
        }
    ],
    "key_missions": [
        {
            "id": "k1",
            "brand": "Avène",
            "mission_type": "animation",
            "pharmacy_type": "centre_commercial",
            "city": "Paris",
            "date": "03/2023",
            "description": "Journée découverte soins solaires",
            "results": "+30% de ventes",
        }
    ],
    "formations": [],
    "brand_certifications": [
        {"id": "c1", "brand": "Vichy", "certification_name": "Expert peau", "year": 2022}
    ],
    "animation_specialties": ["dermocosmetique", "aromatherapie"],
    "software": [],
    "languages": [{"language": "francais", "level": "native"}],
    "daily_rate_min": 250,
    "daily_rate_max": None,
    "mobility_zones": ["Île-de-France", "Hauts-de-France"],
    "has_vehicle": True,
    "show_photo": False,
    "show_rating": True,
    "show_contact": False,
}


@pytest.fixture
def now() -> date:
    return NOW


@pytest.fixture
def sample_cv() -> dict:
    return copy.deepcopy(SAMPLE_CV)


@pytest.fixture
def sample_profile() -> dict:
    return copy.deepcopy(SAMPLE_PROFILE)


@pytest.fixture
def animator_cv() -> dict:
    return copy.deepcopy(SAMPLE_ANIMATOR_CV)


@pytest.fixture
def id_gen() -> IdGenerator:
    return IdGenerator(clock=lambda: 1_700_000_000.0, rng=random.Random(42))


@pytest.fixture
def write_json(tmp_path: Path):
    def _write(name: str, data) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        return path

    return _write
