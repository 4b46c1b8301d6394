"""Accessible Colors - WCAG contrast colors and accessible color ramps."""

import logging

__version__ = "0.1.0"

# Configure logging for the entire package
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
