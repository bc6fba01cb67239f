from pathlib import Path

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field


class HighlightCard(BaseModel):
    """A single card shown on the landing page."""

    model_config = ConfigDict(frozen=True)

    icon: str = Field(default="ℹ️")
    title: str
    description: str


def _default_highlights() -> list[HighlightCard]:
    return [
        HighlightCard(
            icon="🌍",
            title="Economic Comparison",
            description="GDP, consumer spending, FDI and innovation: U.S. against the world.",
        ),
        HighlightCard(
            icon="📈",
            title="Stock Prices",
            description="Daily candlestick charts for AAPL, IBM, MSFT and JPM.",
        ),
        HighlightCard(
            icon="📝",
            title="Summary",
            description="A one-line takeaway for every selection.",
        ),
    ]


# --- ROOT CONFIG ---
class LandingPageConfig(BaseModel):
    """
    Root configuration model for the landing page.
    """

    model_config = ConfigDict(frozen=True)

    title: str = "📊 Economic Comparison Dashboard"
    subtitle: str = "Compare the U.S. economy with global figures and explore stock prices."
    highlights: list[HighlightCard] = Field(default_factory=_default_highlights)
    footer: str | None = None


def load_landing_page_config(
    config_path: Path = Path("config/landing_page.yaml"),
) -> LandingPageConfig:
    if not config_path.exists():
        logger.warning(f"Landing page config not found at {config_path}. Using defaults.")
        return LandingPageConfig()

    try:
        with open(config_path, encoding="utf-8") as f:
            raw_data = yaml.safe_load(f) or {}
        return LandingPageConfig(**raw_data)

    except Exception as e:
        logger.error(f"Failed to load landing page config: {e}")
        return LandingPageConfig()
