"""Portfolio Site — chat relay, contact form and portfolio data service."""
