import logging
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from ..checks import require_finite
from ..config import Category
from ..errors import ValidationError

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Allocation:
    category: Category
    amount: float

class ProportionalAllocator:
    def allocate(self, categories: Sequence[Category], total_budget: float) -> List[Allocation]:
        """Split total_budget as budget * priority / sum(priorities), in input order."""
        if not categories:
            raise ValidationError("At least one category is required")
        total_budget = require_finite(total_budget, "Total budget")
        if total_budget < 0:
            raise ValidationError(f"Total budget must be non-negative, got {total_budget}")

        w = np.array([c.priority for c in categories], dtype=float)
        amounts = float(total_budget) * w / w.sum()
        logger.debug("Allocated %.2f across %d categories", total_budget, len(categories))
        return [Allocation(category=c, amount=float(a)) for c, a in zip(categories, amounts)]
