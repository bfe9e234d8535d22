"""
Command-line interface for sentiment-monitor.

Usage:
    sentiment-monitor serve              # Run the API server
    sentiment-monitor analyze "text"     # Classify a text locally
"""

import asyncio
import sys

import click

from sentiment_monitor.config.settings import get_settings
from sentiment_monitor.observability.logging import setup_logging


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool) -> None:
    """Sentiment Monitor - customer feedback sentiment dashboard backend."""
    if debug:
        import os

        os.environ["LOG_LEVEL"] = "DEBUG"
        get_settings.cache_clear()

    setup_logging()


@main.command()
@click.option("--host", default=None, help="API server host")
@click.option("--port", default=None, type=int, help="API server port")
@click.option("--reload", is_flag=True, help="Enable auto-reload (dev only)")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Start the API server."""
    import uvicorn

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    click.echo(f"Starting API server on {host}:{port}")
    click.echo(f"API docs available on http://localhost:{port}/docs")

    uvicorn.run(
        "sentiment_monitor.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level="info",
    )


@main.command()
@click.argument("text")
@click.option("--token", default=None, help="Hugging Face token (remote mode)")
@click.option("--seed", default=None, type=int, help="Seed for heuristic scores")
def analyze(text: str, token: str | None, seed: int | None) -> None:
    """Classify TEXT and print its label and score."""
    import random

    from sentiment_monitor.sentiment.classifier import SentimentClassifier

    if not text.strip():
        click.echo(click.style("Text is required", fg="red"), err=True)
        sys.exit(2)

    settings = get_settings()
    token = token or settings.huggingface_api_token

    async def run():
        classifier = SentimentClassifier(
            rng=random.Random(seed) if seed is not None else None,
        )
        try:
            return await classifier.classify(
                text, token=token, demo_mode=settings.demo_mode
            )
        finally:
            await classifier.close()

    result = asyncio.run(run())
    color = {"POSITIVE": "green", "NEGATIVE": "red"}.get(result.label, "yellow")
    click.echo(f"{click.style(result.label, fg=color)} {result.score:.3f}")


if __name__ == "__main__":
    main()
