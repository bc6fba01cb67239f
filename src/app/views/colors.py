# Define a static color class for consistent use across the app

from src.core.domain_models import Region


class Colors:
    # Primary / Neutral
    dark_blue = "#1e3a8a"  # Blue 900, used for the U.S. series

    # Semantic: Success / Growth
    green = "#059669"  # Emerald 600

    # Semantic: Danger / Loss
    red = "#dc2626"  # Red 600, used for the Global series


REGION_COLOR_MAP = {
    Region.US: Colors.dark_blue,
    Region.GLOBAL: Colors.red,
}

# Candlestick body colors
CANDLE_INCREASING = Colors.green
CANDLE_DECREASING = Colors.red
