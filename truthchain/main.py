"""Main script for checking claims from the terminal."""

import asyncio
import logging

from .domain.errors import ModelInvocationFailure, ValidationFailure
from .domain.services.explanation_composer import format_explanation
from .infrastructure.dependencies import get_service_container


async def main():
    """Run the interactive fact checker."""
    logging.basicConfig(level=logging.WARNING)
    print("TruthChain PH - AI-powered fact checking")
    print("----------------------------------------")

    container = get_service_container()
    try:
        service = await container.get_fact_checking_service()
    except ModelInvocationFailure as e:
        print(f"Could not start: {e}")
        return

    try:
        while True:
            # Get statement from user
            statement = input("\nEnter a claim to fact-check (or 'quit' to exit): ")
            if statement.lower() in ('quit', 'exit', 'q'):
                break

            print("\nChecking facts...")
            try:
                result = await service.verify(statement)
            except (ValidationFailure, ModelInvocationFailure) as e:
                print(f"\nError checking facts: {e}")
                continue

            # Print results
            print("\nResults:")
            print(f"Verdict: {result.verdict.legacy_label}")
            print(f"Confidence: {result.confidence}%")
            print(f"\nExplanation:\n{format_explanation(result.explanation)}")
            if result.why_fake:
                print(f"\n{result.why_fake}")

            print("\nSources:")
            for i, source in enumerate(result.sources, 1):
                print(f"{i}. {source.title}: {source.url}")

    finally:
        # Clean up
        await container.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
