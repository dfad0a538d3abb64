"""
Dual-LLM Consensus Q&A
Interactive entry point: asks Gemini and Groq the same question and only
answers once both agree, or shows both answers when they never do.

Usage:
    python main.py                          # Start the interactive session
    python main.py --max-retries 5          # Allow five attempts per question
    python main.py --check-keys             # Check API key configuration
    python main.py --check-keys --test-message "Hello"  # Test API connections
"""

import argparse
import asyncio
import signal
import sys
import time
from typing import List, Optional

from dotenv import load_dotenv

from config.config import AppConfig, load_config, validate_api_keys
from src.exceptions import BackendError, CredentialError
from src.llm_clients.base_client import BaseLLMClient
from src.llm_clients.google_client import GoogleClient
from src.llm_clients.groq_client import GroqClient
from src.orchestrator import ConsensusOrchestrator
from src.session import ConsoleReader, InteractiveSession


def positive_int(value: str) -> int:
    """argparse type for the retry budget."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Dual-LLM Consensus Q&A",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python main.py                           # Interactive session
    python main.py --max-retries 5           # Five attempts per question
    python main.py --check-keys              # Check API key configuration
    python main.py --check-keys --test-message "Hello"  # Test API connections
        """
    )

    parser.add_argument('--max-retries', type=positive_int, default=3,
                       help='Maximum number of retry attempts (default: 3)')
    parser.add_argument('--env-file', type=str, default='.env',
                       help='Path to the .env file holding API keys')
    parser.add_argument('--quiet', action='store_true',
                       help='Do not print per-attempt log lines')
    parser.add_argument('--check-keys', action='store_true',
                       help='Check API key configuration')
    parser.add_argument('--test-message', type=str, default=None,
                       help='Test message to send to both backends (use with --check-keys)')

    return parser


def check_api_keys() -> bool:
    """Check and report API key status."""
    print("\n" + "=" * 60)
    print("API Key Status")
    print("=" * 60)

    status = validate_api_keys()

    for model, configured in status.items():
        status_str = "[OK] Configured" if configured else "[X] Missing"
        print(f"  {model.upper()}: {status_str}")

    all_configured = all(status.values())
    if not all_configured:
        print("\nWarning: Some API keys are missing.")
        print("Create a .env file with your API keys:")
        print("  GEMINI_API_KEY=your_key")
        print("  GROQ_API_KEY=your_key")

    return all_configured


def build_clients(config: AppConfig) -> List[BaseLLMClient]:
    """Create Backend A and Backend B clients from the loaded configuration."""
    return [
        GoogleClient(config.gemini),
        GroqClient(config.groq, timeout=config.system.api_timeout)
    ]


async def test_api_connections(config: AppConfig, test_message: str) -> dict:
    """
    Send a test message to each backend and report the outcome.

    Args:
        config: Loaded application configuration
        test_message: Message to send to each backend

    Returns:
        Mapping of backend name to status details
    """
    print("\n" + "=" * 60)
    print("API Connection Test")
    print("=" * 60)
    print(f"Test message: \"{test_message}\"")
    print("-" * 60)

    results = {}

    for client in build_clients(config):
        print(f"\n  Testing {client.name}...", end=" ", flush=True)

        start_time = time.time()
        try:
            response = await client.generate(prompt=test_message, max_tokens=100)
        except BackendError as e:
            print("[FAIL]")
            print(f"    Error: {e}")
            results[client.name] = {"status": "failed", "error": str(e)}
            continue

        elapsed = time.time() - start_time
        print(f"[OK] ({elapsed:.2f}s)")
        print(f"    Response: {response[:100]}{'...' if len(response) > 100 else ''}")
        results[client.name] = {"status": "success", "time": elapsed, "response": response}

    success_count = sum(1 for r in results.values() if r["status"] == "success")
    print("\n" + "-" * 60)
    print(f"Summary: {success_count}/{len(results)} API connection(s) working")

    return results


async def run_session(config: AppConfig, verbose: bool = True):
    """
    Run the interactive session until exit, end of input or a signal.

    SIGINT and SIGTERM set the shared cancellation token and cancel the
    session task; in-flight backend calls are abandoned.
    """
    cancel_event = asyncio.Event()
    primary, secondary = build_clients(config)

    orchestrator = ConsensusOrchestrator(
        primary=primary,
        secondary=secondary,
        max_retries=config.max_retries,
        verbose=verbose
    )
    session = InteractiveSession(
        orchestrator=orchestrator,
        reader=ConsoleReader(sys.stdin),
        cancel_event=cancel_event
    )

    loop = asyncio.get_running_loop()
    task = asyncio.current_task()

    def shutdown():
        print("\nReceived interrupt signal. Shutting down gracefully...")
        cancel_event.set()
        task.cancel()

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, shutdown)
        except (NotImplementedError, RuntimeError):
            # Windows event loops: Ctrl+C arrives as KeyboardInterrupt instead
            pass

    try:
        await session.run()
    except asyncio.CancelledError:
        print("Goodbye!")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.check_keys:
        load_dotenv(args.env_file)
        configured = check_api_keys()
        if args.test_message and configured:
            asyncio.run(test_api_connections(load_config(env_file=None), args.test_message))
        return 0

    try:
        config = load_config(max_retries=args.max_retries, env_file=args.env_file)
    except CredentialError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        asyncio.run(run_session(config, verbose=not args.quiet))
    except KeyboardInterrupt:
        print("\nReceived interrupt signal. Shutting down gracefully...")
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
