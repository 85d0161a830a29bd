"""Locator strategy resolution utilities."""

from selenium.webdriver.common.by import By


# Map strategy names to Selenium By constants
STRATEGY_MAP = {
    "css": By.CSS_SELECTOR,
    "xpath": By.XPATH,
    "id": By.ID,
    "name": By.NAME,
    "class": By.CLASS_NAME,
    "tag": By.TAG_NAME,
    "link_text": By.LINK_TEXT,
    "partial_link_text": By.PARTIAL_LINK_TEXT,
}

WIRE_STRATEGIES = frozenset(STRATEGY_MAP.values())


def get_by_strategy(strategy: str) -> str:
    """
    Convert a strategy name to the value sent as ``using`` on the wire.

    Args:
        strategy: Short name (css, xpath, id, name, class, tag, link_text,
            partial_link_text) or a wire value such as "css selector"

    Returns:
        Wire locator strategy

    Raises:
        ValueError: If strategy is not supported
    """
    if strategy in WIRE_STRATEGIES:
        return strategy
    key = strategy.lower()
    if key not in STRATEGY_MAP:
        raise ValueError(
            f"Unsupported locator strategy: {strategy}. "
            f"Supported: {list(STRATEGY_MAP.keys())}"
        )
    return STRATEGY_MAP[key]
