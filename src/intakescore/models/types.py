from enum import Enum

# Onsets under six weeks
class AcuteOnset(str, Enum):
    UNDER_1W = "<1w"
    W1_3 = "1-3w"
    W3_6 = "3-6w"

class HighRepetition(str, Enum):
    OFTEN = "often"
    CONSTANT = "constant"

class ErgonomicCause(str, Enum):
    POSTURE = "posture"
    REPETITION = "repetition"
    OVERHEAD = "overhead"
    VIBRATION = "vibration"

class RedFlagCategory(str, Enum):
    NEUROLOGICAL_SYMPTOMS = "neurological_symptoms"
    CAUDA_EQUINA_SIGNS = "cauda_equina_signs"
    SYSTEMIC_FEATURES = "systemic_features"
    RECENT_MAJOR_TRAUMA = "recent_major_trauma"
