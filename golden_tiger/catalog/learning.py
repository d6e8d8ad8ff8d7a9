"""Learning Hub content. Static, shown as-is."""

from typing import Optional

from golden_tiger.models.reference import LearningContentType, LearningItem


LEARNING_CONTENT: tuple[LearningItem, ...] = (
    LearningItem(
        id="a1",
        content_type=LearningContentType.ARTICLE,
        title="Value Investing Explained",
        description="Learn the principles of value investing and how to spot undervalued stocks.",
    ),
    LearningItem(
        id="a2",
        content_type=LearningContentType.ARTICLE,
        title="Growth vs. Index Funds",
        description="Compare growth investing with index fund strategies.",
    ),
    LearningItem(
        id="v1",
        content_type=LearningContentType.VIDEO,
        title="How Bonds Work",
        description="A short video explaining the basics of bonds and fixed income.",
    ),
    LearningItem(
        id="i1",
        content_type=LearningContentType.INFOGRAPHIC,
        title="Risk Diversification",
        description="Visual guide to diversifying your investments.",
    ),
    LearningItem(
        id="q1",
        content_type=LearningContentType.QUICK_FACT,
        title="What is ROI?",
        description="ROI stands for Return on Investment, a key metric for evaluating performance.",
    ),
    LearningItem(
        id="q2",
        content_type=LearningContentType.QUICK_FACT,
        title="Dividends",
        description="Dividends are payments made by a corporation to its shareholders.",
    ),
)


def learning_items(
    content_type: Optional[LearningContentType] = None,
) -> list[LearningItem]:
    """All Learning Hub items, optionally only one kind."""
    if content_type is None:
        return list(LEARNING_CONTENT)
    return [item for item in LEARNING_CONTENT if item.content_type == content_type]
