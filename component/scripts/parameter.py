# File containing shared parameters for the sample size calculator
CONFIDENCE_LEVELS = (90, 95, 99)

Z_SCORES = {
    90: 1.645,
    95: 1.96,
    99: 2.576,
}

# Used for any confidence level outside CONFIDENCE_LEVELS
DEFAULT_Z_SCORE = 1.96

DEFAULT_CONFIDENCE_LEVEL = 95
DEFAULT_MAX_ERROR_SQUARED = 25000.0

# (name, population, variance)
DEFAULT_STRATA = (
    ("Stratum 1", 60, 12.0),
    ("Stratum 2", 58, 15.0),
    ("Stratum 3", 70, 20.0),
    ("Stratum 4", 45, 40.0),
)

STRATUM_NAME_TEMPLATE = "Stratum {}"

# Standard normal density curve
CURVE_POINT_COUNT = 100
CURVE_X_RANGE = (-4.0, 4.0)

LOG_CFG_ENV_VAR = "STRATA_LOG_CFG"

chart_colors = [
    "#5470c6",
    "#91cc75",
    "#fac858",
    "#ee6666",
    "#73c0de",
    "#3ba272",
    "#fc8452",
    "#9a60b4",
    "#ea7ccc",
]
