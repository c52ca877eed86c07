# -*- coding: utf-8 -*-
"""
Mock Property Client - offline stand-in for PropertyApiClient.

Simulates the backend round trip with a fixed delay. Used in "mock"
data mode and by tests.
"""

import time
import uuid
from typing import List, Optional

from models.property_draft import PropertyDraft
from utils.logger import get_logger

logger = get_logger(__name__)


class MockPropertyClient:
    """In-memory property client with the same interface as PropertyApiClient."""

    def __init__(self, delay: float = 0.0, fail_with: Optional[Exception] = None):
        """
        Args:
            delay: Seconds to wait before answering
            fail_with: Exception raised by every create_property call
        """
        self.delay = delay
        self.fail_with = fail_with
        self.created: List[PropertyDraft] = []

    def create_property(self, draft: PropertyDraft) -> str:
        if self.delay:
            time.sleep(self.delay)
        if self.fail_with is not None:
            logger.info(f"Mock submission failing with {type(self.fail_with).__name__}")
            raise self.fail_with

        self.created.append(draft)
        property_id = str(uuid.uuid4())
        logger.info(f"Mock property created: {property_id} ({len(draft.units)} units)")
        return property_id
