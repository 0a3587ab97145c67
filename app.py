# app.py
"""
Interactive PDF chat:
    python app.py        (or the `pdfchat` console script)

Configuration comes from the environment / .env (see settings.py).
"""
import sys
from typing import Callable

from errors import AgentError, RagError
from indexer import build_index, ingest_sources, make_embeddings
from log import CLI, configure_logging, get_logger
from qa_app import RagAgent, build_llm
from settings import Settings

logger = get_logger(__name__)

EXIT_COMMANDS = {"exit", "quit"}
RULE = "=" * 64


def chat_loop(
    agent: RagAgent,
    input_fn: Callable[[str], str] = input,
    print_fn: Callable[..., None] = print,
) -> None:
    """Read questions until `exit`, EOF or Ctrl‑C; a failed turn does not end the session."""
    print_fn("Welcome to the chatbot! Type 'exit' to quit.")
    while True:
        try:
            question = input_fn("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print_fn()
            break
        if not question:
            continue
        if question.lower() in EXIT_COMMANDS:
            break

        try:
            reply = agent.answer(question)
        except AgentError as e:
            logger.warning(f"{CLI} {e}")
            print_fn(f"Error: {e}")
            continue
        except KeyboardInterrupt:
            print_fn()
            break
        print_fn(f"{RULE}\n{reply}\n{RULE}")


def main() -> int:
    try:
        settings = Settings.from_env()
    except RagError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    configure_logging(settings.log_level)

    try:
        # 1) Load + chunk
        passages = ingest_sources(settings.sources, chunk_size=settings.chunk_size)
        # 2) Embed + index
        index = build_index(passages, make_embeddings(settings.embedding_model))
        # 3) Agent
        agent = RagAgent(index, build_llm(settings.chat_model), k=settings.top_k)
    except RagError as e:
        logger.error(f"{CLI} {e}")
        return 1

    logger.info(f"{CLI} Starting CLI chatbot...")
    chat_loop(agent)
    return 0


if __name__ == "__main__":
    sys.exit(main())
