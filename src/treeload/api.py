"""Constants shared by the include resolver and the report formatter.

This module defines the reserved include key, the recursion guard and the
layout of the framed text blocks.
"""

# Current API version
API_VERSION = "1.0"

# Reserved key interpreted as an include directive (case-sensitive)
INCLUDE_KEY = "IncludeFile"

# Maximum nesting level of included files (the root file is level 1)
DEPTH_LIMIT = 20

# Framing of the diagnostics report and of the tree dump
DELIMITER = "="
FRAME_WIDTH = 80

# Separator used to address nested children with a single string
PATH_SEPARATOR = "."
