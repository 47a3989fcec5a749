"""
Preference flag names and retention.
"""

# ---- Flag Names ----

# "true" means the term is shown on the front face of a card
SIDE_FLAG = "term_front"

# Automatically speak the term / definition whenever that face is shown
TERM_VOICE_FLAG = "term_voice"
DEF_VOICE_FLAG = "def_voice"


# ---- Storage ----

RETENTION_DAYS = 365  # How long a written flag survives without being rewritten

TRUE_VALUE = "true"
FALSE_VALUE = "false"
