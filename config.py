"""
Configuration for FitTrack application.

Toggle between PRODUCTION and DEVELOPMENT mode.
"""
import os

# ==================== MODE SELECTION ====================
# Override with FITTRACK_MODE environment variable
MODE = os.environ.get("FITTRACK_MODE", "PRODUCTION").upper()  # Options: "PRODUCTION" or "DEVELOPMENT"
# ========================================================

if MODE not in ("PRODUCTION", "DEVELOPMENT"):
    raise ValueError(f"Invalid MODE: {MODE}. Must be 'PRODUCTION' or 'DEVELOPMENT'")

# Logging
LOG_LEVEL = os.environ.get("FITTRACK_LOG_LEVEL", "DEBUG" if MODE == "DEVELOPMENT" else "WARNING")
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Dates are entered and shown as YYYY-MM-DD
DATE_FORMAT = "%Y-%m-%d"

# Profile used until the user runs editprofile
DEFAULT_HEIGHT_CM = 1.0
DEFAULT_WEIGHT_KG = 1.0
DEFAULT_GENDER = "M"
DEFAULT_CALORIE_LIMIT = 0.0

# BMI category upper bounds (exclusive), checked in order
BMI_CATEGORIES = [
    (18.5, "Underweight"),
    (25.0, "Normal"),
    (30.0, "Overweight"),
]
BMI_TOP_CATEGORY = "Obese"

# BMI range used by checkrecommendedweight
RECOMMENDED_BMI_MIN = 18.5
RECOMMENDED_BMI_MAX = 24.9

# REPL prompt
PROMPT = "> "

if __name__ == "__main__":
    # Test configuration
    print(f"\nMode: {MODE}")
    print(f"Log level: {LOG_LEVEL}")
    print(f"Date format: {DATE_FORMAT}")
