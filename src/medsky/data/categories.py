"""Static template data for case-study generation.

The registry maps each of the 13 medical fields to its title prefix, PubMed
query seed and phrase pools. It is built once at import and is read-only.
"""

from types import MappingProxyType
from typing import List, Mapping

from medsky.core.errors import UnknownCategoryError
from medsky.models.domain import CategoryDefinition, PatientProfile

_CATEGORY_DATA = {
    "cardiology": dict(
        title_prefix="Acute Cardiac Case",
        query_base="cardiology diagnosis",
        condition_examples=(
            "Myocardial Infarction",
            "Atrial Fibrillation",
            "Heart Failure",
        ),
        symptoms_pool=(
            "chest pain",
            "dyspnea",
            "palpitations",
            "fatigue",
            "sweating",
            "nausea",
        ),
        history_pool=(
            "hypertension",
            "smoking",
            "diabetes",
            "family history of heart disease",
        ),
        vitals_pool=(
            "BP 140/90, HR 100 bpm",
            "BP 130/80, HR 120 bpm (irregular)",
            "BP 150/95, HR 90 bpm",
        ),
        labs_pool=(
            "Elevated troponin",
            "Normal electrolytes",
            "ECG: ST elevation",
            "BNP elevated",
        ),
    ),
    "neurology": dict(
        title_prefix="Acute Neurological Case",
        query_base="neurology diagnosis",
        condition_examples=("Ischemic Stroke", "Epilepsy", "Parkinson’s Disease"),
        symptoms_pool=(
            "sudden weakness",
            "slurred speech",
            "seizures",
            "tremors",
            "headache",
            "dizziness",
        ),
        history_pool=(
            "hypertension",
            "previous stroke",
            "family history of seizures",
        ),
        vitals_pool=("BP 170/100, HR 85 bpm", "BP 120/80, HR 80 bpm"),
        labs_pool=("Normal glucose", "CT: no hemorrhage", "EEG: abnormal"),
    ),
    "endocrinology": dict(
        title_prefix="Metabolic Emergency Case",
        query_base="endocrinology diagnosis",
        condition_examples=(
            "Diabetic Ketoacidosis",
            "Hyperthyroidism",
            "Adrenal Insufficiency",
        ),
        symptoms_pool=(
            "polyuria",
            "polydipsia",
            "fatigue",
            "weight loss",
            "tremors",
            "palpitations",
        ),
        history_pool=(
            "Type 1 diabetes",
            "family history of thyroid disease",
            "steroid use",
        ),
        vitals_pool=("BP 110/70, HR 110 bpm", "BP 130/85, HR 100 bpm"),
        labs_pool=("Glucose 450 mg/dL", "Elevated TSH", "Low cortisol"),
    ),
    "pharmacology": dict(
        title_prefix="Infectious Disease Case",
        query_base="infectious disease treatment",
        condition_examples=("Antibiotic Resistance", "Sepsis", "Tuberculosis"),
        symptoms_pool=(
            "fever",
            "chills",
            "purulent discharge",
            "cough",
            "swelling",
        ),
        history_pool=("recent hospitalization", "antibiotic use", "travel history"),
        vitals_pool=("BP 125/80, HR 90 bpm, Temp 38.5°C", "BP 100/60, HR 110 bpm"),
        labs_pool=(
            "Culture: MRSA positive",
            "CRP elevated",
            "Sputum: AFB positive",
        ),
    ),
    "biochemistry": dict(
        title_prefix="Electrolyte Imbalance Case",
        query_base="electrolyte imbalance diagnosis",
        condition_examples=("Hyperkalemia", "Hyponatremia", "Metabolic Acidosis"),
        symptoms_pool=("muscle weakness", "confusion", "palpitations", "nausea"),
        history_pool=("chronic kidney disease", "diuretic use", "dehydration"),
        vitals_pool=("BP 135/85, HR 70 bpm", "BP 110/70, HR 95 bpm"),
        labs_pool=("Potassium 6.8 mEq/L", "Sodium 125 mEq/L", "pH 7.2"),
    ),
    "gastroenterology": dict(
        title_prefix="Gastrointestinal Case",
        query_base="gastroenterology diagnosis",
        condition_examples=("Peptic Ulcer Disease", "Crohn’s Disease", "Hepatitis"),
        symptoms_pool=(
            "epigastric pain",
            "nausea",
            "diarrhea",
            "jaundice",
            "heartburn",
        ),
        history_pool=("NSAID use", "family history of IBD", "alcohol use"),
        vitals_pool=("BP 120/80, HR 80 bpm", "BP 130/85, HR 90 bpm"),
        labs_pool=("H. pylori positive", "Elevated LFTs", "CRP elevated"),
    ),
    "obstetrics_gynecology": dict(
        title_prefix="Obstetric Case",
        query_base="obstetrics diagnosis",
        condition_examples=(
            "Preeclampsia",
            "Gestational Diabetes",
            "Ectopic Pregnancy",
        ),
        symptoms_pool=("hypertension", "edema", "abdominal pain", "weight gain"),
        history_pool=(
            "first pregnancy",
            "family history of diabetes",
            "previous miscarriage",
        ),
        vitals_pool=("BP 160/110, HR 90 bpm", "BP 130/80, HR 85 bpm"),
        labs_pool=("Proteinuria", "Glucose 180 mg/dL", "hCG elevated"),
    ),
    "oncology": dict(
        title_prefix="Oncologic Case",
        query_base="oncology diagnosis",
        condition_examples=("Lung Cancer", "Breast Cancer", "Leukemia"),
        symptoms_pool=("chronic cough", "weight loss", "fatigue", "night sweats"),
        history_pool=(
            "smoking history",
            "family history of cancer",
            "chemotherapy",
        ),
        vitals_pool=("BP 130/85, HR 88 bpm", "BP 120/80, HR 90 bpm"),
        labs_pool=("Chest CT: lung mass", "CBC: anemia", "Biopsy: malignant"),
    ),
    "nephrology": dict(
        title_prefix="Renal Case",
        query_base="nephrology diagnosis",
        condition_examples=(
            "Acute Kidney Injury",
            "Chronic Kidney Disease",
            "Nephrotic Syndrome",
        ),
        symptoms_pool=("oliguria", "edema", "fatigue", "hypertension"),
        history_pool=("dehydration", "diabetes", "NSAID use"),
        vitals_pool=("BP 145/90, HR 95 bpm", "BP 150/100, HR 80 bpm"),
        labs_pool=("Creatinine 2.5 mg/dL", "Proteinuria", "BUN elevated"),
    ),
    "hematology": dict(
        title_prefix="Hematologic Case",
        query_base="hematology diagnosis",
        condition_examples=(
            "Iron Deficiency Anemia",
            "Sickle Cell Disease",
            "Thrombocytopenia",
        ),
        symptoms_pool=("fatigue", "pallor", "bruising", "dyspnea"),
        history_pool=(
            "heavy menstrual bleeding",
            "family history of anemia",
            "recent infection",
        ),
        vitals_pool=("BP 110/70, HR 100 bpm", "BP 120/80, HR 90 bpm"),
        labs_pool=(
            "Hemoglobin 8 g/dL",
            "Sickle cells on smear",
            "Platelets 50,000",
        ),
    ),
    "pediatrics": dict(
        title_prefix="Pediatric Case",
        query_base="pediatric diagnosis",
        condition_examples=("Asthma Exacerbation", "Croup", "Type 1 Diabetes"),
        symptoms_pool=("wheezing", "cough", "polyuria", "fever"),
        history_pool=(
            "history of asthma",
            "recent viral infection",
            "family history of diabetes",
        ),
        vitals_pool=("BP 100/60, HR 120 bpm, RR 30", "BP 90/60, HR 110 bpm"),
        labs_pool=("SpO2 92%", "Glucose 300 mg/dL", "Normal CBC"),
    ),
    "dermatology": dict(
        title_prefix="Dermatologic Case",
        query_base="dermatology diagnosis",
        condition_examples=("Psoriasis", "Eczema", "Melanoma"),
        symptoms_pool=("scaly plaques", "itching", "pigmented lesion", "rash"),
        history_pool=(
            "family history of psoriasis",
            "sun exposure",
            "atopic dermatitis",
        ),
        vitals_pool=("BP 125/80, HR 75 bpm", "BP 120/80, HR 80 bpm"),
        labs_pool=("Normal ESR", "Biopsy: atypical cells", "Skin swab: negative"),
    ),
    "immunology": dict(
        title_prefix="Immunologic Case",
        query_base="immunology diagnosis",
        condition_examples=(
            "Systemic Lupus Erythematosus",
            "Rheumatoid Arthritis",
            "Allergic Reaction",
        ),
        symptoms_pool=("rash", "joint pain", "fatigue", "swelling"),
        history_pool=(
            "family history of autoimmune disease",
            "recent allergen exposure",
        ),
        vitals_pool=("BP 130/80, HR 85 bpm", "BP 125/80, HR 90 bpm"),
        labs_pool=("Positive ANA", "Elevated RF", "IgE elevated"),
    ),
}

CATEGORIES: Mapping[str, CategoryDefinition] = MappingProxyType({
    key: CategoryDefinition(**data) for key, data in _CATEGORY_DATA.items()
})

PATIENT_PROFILES = (
    PatientProfile(age=60, gender="male"),
    PatientProfile(age=45, gender="female"),
    PatientProfile(age=30, gender="male"),
    PatientProfile(age=50, gender="female"),
    PatientProfile(age=25, gender="female"),
    PatientProfile(age=15, gender="male"),
    PatientProfile(age=8, gender="female"),
)

QUESTION_TEMPLATES = (
    "What is the most likely diagnosis?",
    "What is the most appropriate treatment?",
    "What is the next diagnostic step?",
)


def is_known_category(key: str) -> bool:
    return key in CATEGORIES


def get_category(key: str) -> CategoryDefinition:
    """Look up a category definition.

    Raises:
        UnknownCategoryError: If ``key`` is not one of the known fields
    """
    try:
        return CATEGORIES[key]
    except (KeyError, TypeError):
        raise UnknownCategoryError(
            f"Unknown disease field: {key!r}",
            details={"known_fields": list(CATEGORIES)}
        ) from None


def list_categories() -> List[str]:
    """Category keys in display order."""
    return list(CATEGORIES)


def category_label(key: str) -> str:
    """Display label, e.g. ``obstetrics_gynecology`` -> ``Obstetrics Gynecology``."""
    return " ".join(word.capitalize() for word in key.split("_"))
