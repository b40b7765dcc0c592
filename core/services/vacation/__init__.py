from core.services.vacation.overlap import find_overlaps
from core.services.vacation.removal import RemovalKind, RemovalPlan, remove_day
from core.services.vacation.segmentation import IntervalSegmenter
from core.services.vacation.service import RequestPreview, VacationService

__all__ = [
    "IntervalSegmenter",
    "find_overlaps",
    "RemovalKind",
    "RemovalPlan",
    "remove_day",
    "RequestPreview",
    "VacationService",
]
