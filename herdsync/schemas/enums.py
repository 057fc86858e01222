from enum import Enum


class CattleSex(str, Enum):
    bull = "Bull"
    cow = "Cow"
    steer = "Steer"
    heifer = "Heifer"
    unknown = "Unknown"


class CattleType(str, Enum):
    beef = "Beef"
    dairy = "Dairy"


class CattleStatus(str, Enum):
    active = "Active"
    sold = "Sold"
    processed = "Processed"
    deceased = "Deceased"


class CattleStage(str, Enum):
    calf = "Calf"
    weanling = "Weanling"
    stocker = "Stocker"
    feeder = "Feeder"
    breeding = "Breeding"
    processed = "Processed"


class ProductionPath(str, Enum):
    beef_finishing = "BeefFinishing"
    breeding = "Breeding"
    dairy = "Dairy"
    market = "Market"
    replacement = "Replacement"


class PregnancyStatus(str, Enum):
    pending = "pending"
    open = "open"
    bred = "bred"
    exposed = "exposed"
    confirmed = "confirmed"
    calved = "calved"
    lost = "lost"


TERMINAL_PREGNANCY_STATUSES = frozenset({PregnancyStatus.calved.value, PregnancyStatus.lost.value})


class BreedingMethod(str, Enum):
    natural = "Natural"
    ai = "AI"
    embryo_transfer = "Embryo Transfer"


class CalvingEase(str, Enum):
    unassisted = "Unassisted"
    easy_pull = "Easy Pull"
    hard_pull = "Hard Pull"
    caesarean = "Caesarean"
    other = "Other"


class RemoteCalfSex(str, Enum):
    """The calving_records.calf_sex check constraint only admits these."""

    bull = "Bull"
    heifer = "Heifer"


class TaskPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


class TaskStatus(str, Enum):
    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"
    cancelled = "cancelled"
