"""
The six life-balance axes every AXIS6 user tracks.
Ids follow `position`, so slug -> id lookups stay stable across installs.
"""

DEFAULT_CATEGORIES = [
    {
        "slug": "physical",
        "name_en": "Physical",
        "name_es": "Física",
        "description_en": "Exercise, health, and nutrition",
        "description_es": "Ejercicio, salud y nutrición",
        "color": "#65D39A",
        "icon": "activity",
        "position": 1,
    },
    {
        "slug": "mental",
        "name_en": "Mental",
        "name_es": "Mental",
        "description_en": "Learning, focus, and productivity",
        "description_es": "Aprendizaje, enfoque y productividad",
        "color": "#9B8AE6",
        "icon": "brain",
        "position": 2,
    },
    {
        "slug": "emotional",
        "name_en": "Emotional",
        "name_es": "Emocional",
        "description_en": "Mood and stress management",
        "description_es": "Estado de ánimo y manejo del estrés",
        "color": "#FF8B7D",
        "icon": "heart",
        "position": 3,
    },
    {
        "slug": "social",
        "name_en": "Social",
        "name_es": "Social",
        "description_en": "Relationships and connections",
        "description_es": "Relaciones y conexiones",
        "color": "#6AA6FF",
        "icon": "users",
        "position": 4,
    },
    {
        "slug": "spiritual",
        "name_en": "Spiritual",
        "name_es": "Espiritual",
        "description_en": "Meditation, purpose, and mindfulness",
        "description_es": "Meditación, propósito y mindfulness",
        "color": "#4ECDC4",
        "icon": "sparkles",
        "position": 5,
    },
    {
        "slug": "material",
        "name_en": "Material",
        "name_es": "Material",
        "description_en": "Finance, career, and resources",
        "description_es": "Finanzas, carrera y recursos",
        "color": "#FFD166",
        "icon": "briefcase",
        "position": 6,
    },
]

CATEGORY_SLUGS = [item["slug"] for item in DEFAULT_CATEGORIES]
