"""Qt background workers and event-loop adapters."""

from .storefront_fetch_worker import QtFetcher, QtScheduler, StorefrontFetchWorker

__all__ = ["QtFetcher", "QtScheduler", "StorefrontFetchWorker"]
