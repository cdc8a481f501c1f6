"""Hand-authored fallback values and vocabularies."""

# Scalar fallbacks, used when no environment override is set
DEFAULT_LOCALE = "en"
DEFAULT_DATE_FORMAT = "YYYY-MM-DD"
DEFAULT_TIME_FORMAT = "HH:mm:ss"
DEFAULT_DATETIME_FORMAT = "YYYY-MM-DD HH:mm:ss"
DEFAULT_CONTINENT_NAME = "Africa"
DEFAULT_COUNTRY_NAME = "Tanzania"
DEFAULT_COUNTRY_CODE = "TZ"
DEFAULT_CALLING_CODE = "255"
DEFAULT_CITY_NAME = "Dar es Salaam"
DEFAULT_DISASTER_PHASE = "Mitigation"

# Used when neither TZ nor DEFAULT_TIMEZONE is set and the host zone is unknown
FALLBACK_TIMEZONE = "UTC"

DISASTER_PHASES = (
    "Mitigation",
    "Preparedness",
    "Response",
    "Recovery",
)

# Map features, see https://wiki.openstreetmap.org/wiki/Map_Features
MAP_FEATURE_DEFAULT_NATURE = "Other"
MAP_FEATURE_DEFAULT_FAMILY = "Other"
MAP_FEATURE_DEFAULT_TYPE = "Other"

# Primary feature tag keys
MAP_FEATURE_NATURES = (
    "Aerialway",
    "Aeroway",
    "Barrier",
    "Boundary",
    "Building",
    "Emergency",
    "Highway",
    "Man Made",
    "Natural",
    "Office",
    "Power",
    "Public Transport",
    "Railway",
    "Route",
    "Shop",
    "Telecom",
    "Tourism",
    "Waterway",
    MAP_FEATURE_DEFAULT_NATURE,
)

# Primary feature tag values, grouped by nature. Some values repeat
# across natures and are deduplicated on build.
MAP_FEATURE_FAMILIES = (
    # Boundary
    "Administrative",
    # Building
    "Commercial",
    "Hospital",
    "Industrial",
    "Religious",
    "Residential",
    "School",
    "Stadium",
    "Toilets",
    "Warehouse",
    # Emergency
    "Ambulance Station",
    "Assembly Point",
    "Fire Hydrant",
    "First Aid Kit",
    "Evacuation Centre",
    # Highway
    "Road",
    "Residential",
    # Man Made
    "Bridge",
    "Pipeline",
    "Wastewater Plant",
    # Natural
    "Wetland",
    # Power
    "Cable",
    "Generator",
    "Line",
    "Plant",
    "Pole",
    "Transformer",
    # Public Transport
    "Platform",
    "Station",
    "Stop Area",
    "Stop Position",
    # Railway
    "Platform",
    "Rail",
    "Station",
    # Route
    "Evacuation",
    # Waterway
    "Ditch",
    "Drain",
    "River",
    "Stream",
    MAP_FEATURE_DEFAULT_FAMILY,
)

# Human readable place tag values
MAP_FEATURE_PLACES = (
    "city",
    "continent",
    "country",
    "county",
    "district",
    "hamlet",
    "municipality",
    "neighbourhood",
    "province",
    "region",
    "state",
    "street",
    "town",
    "village",
    "ward",
)

# Environment override keys
ENV_DEFAULT_LOCALE = "DEFAULT_LOCALE"
ENV_LOCALES = "LOCALES"
ENV_LEGACY_TIMEZONE = "TZ"  # honoured first, as set by most PaaS hosts
ENV_DEFAULT_TIMEZONE = "DEFAULT_TIMEZONE"
ENV_TIMEZONES = "TIMEZONES"
ENV_DEFAULT_DATE_FORMAT = "DEFAULT_DATE_FORMAT"
ENV_DEFAULT_TIME_FORMAT = "DEFAULT_TIME_FORMAT"
ENV_DEFAULT_DATETIME_FORMAT = "DEFAULT_DATETIME_FORMAT"
ENV_DEFAULT_CONTINENT_NAME = "DEFAULT_CONTINENT_NAME"
ENV_DEFAULT_COUNTRY_NAME = "DEFAULT_COUNTRY_NAME"
ENV_DEFAULT_COUNTRY_CODE = "DEFAULT_COUNTRY_CODE"
ENV_DEFAULT_CALLING_CODE = "DEFAULT_CALLING_CODE"
ENV_DEFAULT_CITY_NAME = "DEFAULT_CITY_NAME"
ENV_DEFAULT_DISASTER_PHASE = "DEFAULT_DISASTER_PHASE"
ENV_DISASTER_PHASES = "DISASTER_PHASES"

CALLING_CODE_SEPARATOR = ","
