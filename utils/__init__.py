# Utility modules for the coaching core
from .clock import utcnow, as_datetime
from .text import normalize_unit, normalize_label, fold_umlauts
