"""
Option tables for structured CVs (French pharmacy sector).

Pure lookup data shared by the anonymizer, the renderers and the verifiers.
Every lookup degrades to the raw key when the key is unknown.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

Option = Tuple[str, str]

# ------------------------- Structures -------------------------

COMPANY_TYPES: List[Option] = [
    ("pharmacie_independante", "Pharmacie indépendante"),
    ("pharmacie_groupe", "Pharmacie de groupement"),
    ("pharmacie_centre_commercial", "Pharmacie centre commercial"),
    ("pharmacie_rurale", "Pharmacie rurale"),
    ("pharmacie_quartier", "Pharmacie de quartier"),
    ("parapharmacie", "Parapharmacie"),
    ("pharmacie_hopital", "Pharmacie hospitalière"),
    ("pharmacie_clinique", "Pharmacie de clinique"),
    ("groupement", "Groupement / Enseigne"),
    ("centrale_achat", "Centrale d'achat"),
    ("repartiteur", "Répartiteur pharmaceutique"),
    ("laboratoire", "Laboratoire pharmaceutique"),
    ("industrie", "Industrie pharmaceutique"),
    ("autre", "Autre structure"),
]

# Labels shown instead of the company name in anonymous projections
COMPANY_TYPE_ANONYMOUS_LABELS: Dict[str, str] = {
    "pharmacie_independante": "Pharmacie indépendante",
    "pharmacie_groupe": "Pharmacie de groupement",
    "pharmacie_centre_commercial": "Grande pharmacie urbaine",
    "pharmacie_rurale": "Pharmacie rurale",
    "pharmacie_quartier": "Pharmacie de quartier",
    "parapharmacie": "Parapharmacie",
    "pharmacie_hopital": "Établissement hospitalier",
    "pharmacie_clinique": "Établissement de santé privé",
    "groupement": "Groupement pharmaceutique",
    "centrale_achat": "Centrale d'achat",
    "repartiteur": "Répartiteur pharmaceutique",
    "laboratoire": "Laboratoire pharmaceutique",
    "industrie": "Industrie pharmaceutique",
    "autre": "Structure du secteur pharmaceutique",
}

GENERIC_COMPANY_LABEL = "Structure pharmaceutique"

COMPANY_SIZES: List[Option] = [
    ("small", "Petite (< 5 employés)"),
    ("medium", "Moyenne (5-15 employés)"),
    ("large", "Grande (> 15 employés)"),
]

# ------------------------- Diplomas -------------------------

# (value, label, category)
DIPLOMA_TYPES: List[Tuple[str, str, str]] = [
    ("bp_preparateur", "BP Préparateur en pharmacie", "preparateur"),
    ("deust_preparateur", "DEUST Préparateur en pharmacie", "preparateur"),
    ("docteur_pharmacie", "Docteur en pharmacie", "pharmacien"),
    ("des_pharmacie", "DES Pharmacie", "pharmacien"),
    ("du", "Diplôme Universitaire (DU)", "formation"),
    ("diu", "Diplôme Inter-Universitaire (DIU)", "formation"),
    ("master", "Master", "formation"),
    ("cap_esthetique", "CAP Esthétique", "conseiller"),
    ("bts_esthetique", "BTS Esthétique-Cosmétique", "conseiller"),
    ("bts_dietetique", "BTS Diététique", "conseiller"),
    ("bac", "Baccalauréat", "general"),
    ("autre", "Autre diplôme", "autre"),
]

DIPLOMA_MENTIONS: List[Option] = [
    ("tres_bien", "Très bien"),
    ("bien", "Bien"),
    ("assez_bien", "Assez bien"),
    ("passable", "Passable"),
    ("sans_mention", "Sans mention"),
]

# ------------------------- Skills & tools -------------------------

SKILLS_BY_CATEGORY: Dict[str, List[str]] = {
    "comptoir": [
        "Délivrance ordonnances",
        "Conseil pharmaceutique",
        "Conseil associé",
        "Vente additionnelle",
        "Gestion des stupéfiants",
        "Substitution génériques",
    ],
    "specialites": [
        "Dermocosmétique",
        "Orthopédie",
        "Maintien à domicile (MAD)",
        "Nutrition / Diététique",
        "Phytothérapie",
        "Aromathérapie",
        "Homéopathie",
        "Puériculture",
        "Hygiène bucco-dentaire",
        "Vétérinaire",
        "Optique",
    ],
    "services": [
        "Vaccination",
        "TROD (Tests Rapides)",
        "Entretiens pharmaceutiques",
        "Préparation doses administrer (PDA)",
        "Bilan de médication",
        "Téléconsultation",
        "Dépistage",
    ],
    "gestion": [
        "Gestion des stocks",
        "Commandes / Approvisionnement",
        "Réception marchandises",
        "Inventaire",
        "Merchandising / Facing",
        "Gestion caisse",
        "Facturation / Tiers-payant",
    ],
    "management": [
        "Management d'équipe",
        "Formation collaborateurs",
        "Recrutement",
        "Planning / Organisation",
        "Animation d'équipe",
    ],
    "achats": [
        "Négociation fournisseurs",
        "Analyse des marges",
        "Sourcing",
        "Gestion des génériques",
        "Achats groupements",
    ],
}

ALL_SKILLS: List[str] = [skill for skills in SKILLS_BY_CATEGORY.values() for skill in skills]

# (value, label, category)
SOFTWARE_OPTIONS: List[Tuple[str, str, str]] = [
    ("lgpi", "LGPI (Pharmagest)", "lgo"),
    ("winpharma", "Winpharma", "lgo"),
    ("leo", "LEO (Isipharm)", "lgo"),
    ("alliance_plus", "Alliance Plus", "lgo"),
    ("smart_rx", "Smart Rx", "lgo"),
    ("pharmaland", "Pharmaland", "lgo"),
    ("pharmavitale", "Pharmavitale", "lgo"),
    ("caduciel", "Caduciel", "lgo"),
    ("robot_rowa", "Robot ROWA", "automate"),
    ("robot_mekapharm", "Robot Mekapharm", "automate"),
    ("robot_pharmathek", "Robot Pharmathek", "automate"),
    ("robot_apostore", "Robot Apostore", "automate"),
    ("excel", "Excel", "bureautique"),
    ("word", "Word", "bureautique"),
    ("teams", "Microsoft Teams", "bureautique"),
]

CERTIFICATIONS: List[Option] = [
    ("vaccination_grippe", "Vaccination anti-grippale"),
    ("vaccination_covid", "Vaccination COVID-19"),
    ("vaccination_elargie", "Vaccination élargie (15 valences)"),
    ("trod_angine", "TROD Angine"),
    ("trod_cystite", "TROD Infection urinaire"),
    ("trod_grippe", "TROD Grippe"),
    ("trod_covid", "TROD COVID-19"),
    ("entretien_asthme", "Entretien asthme"),
    ("entretien_diabete", "Entretien diabète"),
    ("entretien_aoc", "Entretien AOC"),
    ("bilan_medication", "Bilan partagé de médication"),
    ("pda", "PDA - Préparation des doses"),
    ("premiers_secours", "Formation premiers secours (PSC1/SST)"),
    ("gestes_urgence", "Gestes d'urgence"),
    ("orthese", "Orthèses / Contention"),
    ("mad", "Maintien à domicile"),
]

# ------------------------- Languages & regions -------------------------

LANGUAGES: List[Option] = [
    ("francais", "Français"),
    ("anglais", "Anglais"),
    ("espagnol", "Espagnol"),
    ("allemand", "Allemand"),
    ("italien", "Italien"),
    ("portugais", "Portugais"),
    ("arabe", "Arabe"),
    ("chinois", "Chinois"),
    ("russe", "Russe"),
    ("japonais", "Japonais"),
    ("autre", "Autre"),
]

LANGUAGE_LEVELS: List[Option] = [
    ("native", "Langue maternelle"),
    ("fluent", "Courant / Bilingue"),
    ("advanced", "Avancé (C1)"),
    ("intermediate", "Intermédiaire (B1-B2)"),
    ("beginner", "Débutant (A1-A2)"),
]

REGIONS: List[str] = [
    "Auvergne-Rhône-Alpes",
    "Bourgogne-Franche-Comté",
    "Bretagne",
    "Centre-Val de Loire",
    "Corse",
    "Grand Est",
    "Hauts-de-France",
    "Île-de-France",
    "Normandie",
    "Nouvelle-Aquitaine",
    "Occitanie",
    "Pays de la Loire",
    "Provence-Alpes-Côte d'Azur",
    "Guadeloupe",
    "Martinique",
    "Guyane",
    "La Réunion",
    "Mayotte",
]

# ------------------------- Animator CV -------------------------

# (value, label, icon)
ANIMATOR_MISSION_TYPES: List[Tuple[str, str, str]] = [
    ("animation", "Animation commerciale", "star"),
    ("formation", "Formation équipe", "book"),
    ("merchandising", "Merchandising", "grid"),
    ("audit", "Audit / Mystery shopping", "clipboard"),
]

PHARMACY_TYPES_FOR_MISSIONS: List[Option] = [
    ("independante", "Pharmacie indépendante"),
    ("groupe", "Pharmacie de groupement"),
    ("centre_commercial", "Pharmacie centre commercial"),
    ("rurale", "Pharmacie rurale"),
    ("quartier", "Pharmacie de quartier"),
    ("parapharmacie", "Parapharmacie"),
    ("hopital", "Pharmacie hospitalière"),
]

MISSION_COUNT_RANGES: List[Option] = [
    ("1-5", "1 à 5 missions"),
    ("6-15", "6 à 15 missions"),
    ("16-30", "16 à 30 missions"),
    ("31-50", "31 à 50 missions"),
    ("50+", "Plus de 50 missions"),
]

# Duration in working days
MISSION_DURATIONS: List[Tuple[int, str]] = [
    (1, "1 jour"),
    (2, "2 jours"),
    (3, "3 jours"),
    (5, "1 semaine"),
    (10, "2 semaines"),
    (20, "1 mois"),
]

ANIMATION_SPECIALTIES: List[Option] = [
    ("dermocosmetique", "Dermocosmétique"),
    ("aromatherapie", "Aromathérapie"),
    ("micronutrition", "Micronutrition"),
    ("complements_alimentaires", "Compléments alimentaires"),
    ("hygiene_bucco_dentaire", "Hygiène bucco-dentaire"),
    ("puericulture", "Puériculture"),
    ("orthopedie_mad", "Orthopédie / MAD"),
]

# ------------------------- Lookups -------------------------

def option_label(options: Sequence[Sequence], value: Optional[str]) -> str:
    """
    Return the label of ``value`` in an option table.

    Rows are ``(value, label, ...)`` tuples. Unknown values are returned as-is,
    ``None`` becomes an empty string.
    """
    if value is None:
        return ""
    for row in options:
        if row[0] == value:
            return row[1]
    return str(value)

def _row(options: Sequence[Sequence], value: Optional[str]) -> Optional[Sequence]:
    for row in options:
        if row[0] == value:
            return row
    return None

def anonymous_company_label(company_type: Optional[str]) -> str:
    """Structure label used in place of a company name. Never returns the raw key."""
    if not company_type:
        return GENERIC_COMPANY_LABEL
    return COMPANY_TYPE_ANONYMOUS_LABELS.get(company_type, GENERIC_COMPANY_LABEL)

def company_size_label(value: Optional[str]) -> str:
    return option_label(COMPANY_SIZES, value)

def diploma_label(value: Optional[str]) -> str:
    return option_label(DIPLOMA_TYPES, value)

def mention_label(value: Optional[str]) -> str:
    return option_label(DIPLOMA_MENTIONS, value)

def level_label(value: Optional[str]) -> str:
    return option_label(LANGUAGE_LEVELS, value)

def language_label(value: Optional[str]) -> str:
    """Language name; unknown keys are shown capitalized."""
    if not value:
        return ""
    row = _row(LANGUAGES, value)
    if row is not None:
        return row[1]
    return value[:1].upper() + value[1:]

def mission_type_label(value: Optional[str]) -> str:
    return option_label(ANIMATOR_MISSION_TYPES, value)

def mission_type_icon(value: Optional[str]) -> str:
    row = _row(ANIMATOR_MISSION_TYPES, value)
    return row[2] if row is not None else "briefcase"

def pharmacy_type_label(value: Optional[str]) -> str:
    return option_label(PHARMACY_TYPES_FOR_MISSIONS, value)

def mission_count_label(value: Optional[str]) -> str:
    return option_label(MISSION_COUNT_RANGES, value)

def specialty_label(value: Optional[str]) -> str:
    return option_label(ANIMATION_SPECIALTIES, value)
