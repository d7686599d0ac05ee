# visas/
# ├── models/
# │   ├── __init__.py
# │   └── visa_configuration.py   <-- The saved builder output (one row per version)

from .visa_configuration import VisaConfiguration
