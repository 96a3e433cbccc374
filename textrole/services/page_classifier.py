"""Page-wide text role classification."""

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple

import structlog

from textrole import config
from textrole.adapters.layout_context import PageLayout, StructuralContext
from textrole.classifiers.role_classifier import RoleClassifier
from textrole.schemas.geometry import StyleHint, TextBlock
from textrole.schemas.role import RoleInfo
from textrole.utils.scale import ScaleModel

logger = structlog.get_logger(__name__)

PageItem = Tuple[TextBlock, StructuralContext, StyleHint]


class PageTextClassifier:
    """
    Classify all text blocks of a page.

    Blocks are independent of each other, so they are evaluated in
    parallel. Results always come back in input order.
    """

    def __init__(
        self,
        classifier: Optional[RoleClassifier] = None,
        max_workers: Optional[int] = None,
    ):
        self.classifier = classifier or RoleClassifier()
        self.max_workers = max_workers or config.settings.max_workers

    def classify_page(
        self,
        items: Sequence[PageItem],
        scale: ScaleModel,
    ) -> List[RoleInfo]:
        """
        Classify text blocks whose structural context is already resolved.

        Args:
            items: (box, context, style hint) triples
            scale: Scale of the page all items belong to

        Returns:
            One role per item, in input order
        """
        if not items:
            return []

        logger.info("Classifying page texts", count=len(items))

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            roles = list(
                executor.map(
                    lambda item: self.classifier.classify(item[0], item[1], item[2], scale),
                    items,
                )
            )

        return roles

    def classify_layout(
        self,
        blocks: Sequence[Tuple[TextBlock, StyleHint]],
        layout: PageLayout,
        scale: ScaleModel,
    ) -> List[RoleInfo]:
        """
        Resolve the containing system of each block, then classify.

        Raises:
            ContextResolutionError: if a block cannot be located in any system
        """
        items = [
            (box, layout.system_at(box.left_point), style_hint)
            for box, style_hint in blocks
        ]
        return self.classify_page(items, scale)
