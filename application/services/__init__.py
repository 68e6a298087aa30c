from .conversion_service import ConversionService
from .currency_service import CurrencyService
from .fetch_orchestrator import FetchOrchestrator
from .merge_table import MergeTable
from .rate_service import RateService
from .registry import ProviderBinding, ProviderRegistry

__all__ = [
    'ConversionService',
    'CurrencyService',
    'FetchOrchestrator',
    'MergeTable',
    'ProviderBinding',
    'ProviderRegistry',
    'RateService',
]
