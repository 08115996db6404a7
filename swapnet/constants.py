"""
Global constants for the swapnet library.

This module centralizes type keys, numeric defaults and file-format delimiters
so that models, the registry and the case loader agree on them.
"""

import torch

# ============================================================================
# Numeric Defaults
# ============================================================================

# Dtype used for parameter storage and forward computation
DEFAULT_DTYPE = torch.float32


# ============================================================================
# Model Type Keys
# ============================================================================

LINEAR_TYPE_KEY = "linear"
LOGISTIC_TYPE_KEY = "logistic"
MULTICLASS_TYPE_KEY = "multiclass"
MLP_TYPE_KEY = "mlp"


# ============================================================================
# Case File Format
# ============================================================================

# Separator between the input, parameter and expected-output fields
CASE_FIELD_DELIMITER = " | "

# Separator between values inside a field
CASE_VALUE_DELIMITER = ","

# Lines starting with this prefix are ignored
CASE_COMMENT_PREFIX = "#"

# Number of fields on a case line: input, parameters, expected output
CASE_NUM_FIELDS = 3
