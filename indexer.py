# indexer.py
"""
Builds an in-memory FAISS vector‑store from the configured PDFs.

    sources ──load──▶ text ──chunk──▶ passages ──embed──▶ FAISS

Nothing is persisted; the store lives for the process lifetime.
"""
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings
from langchain_community.vectorstores import FAISS

from chunker import Passage, assign_ids, chunk_texts
from errors import EmbeddingServiceError, IngestionError, LoadError, NoContentExtracted
from loader import load_pdfs
from log import EMBEDDING, INGEST, VECTOR_DB, get_logger
from settings import DEFAULT_CHUNK_SIZE, EMB_MODEL, Source

logger = get_logger(__name__)

Loader = Callable[[str], Iterable[tuple[object, str]]]


@dataclass(frozen=True)
class SearchHit:
    id: str
    content: str
    score: float


def ingest_sources(
    sources: Iterable[Source],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    load: Loader = load_pdfs,
) -> list[Passage]:
    """
    Load and chunk every source, returning all passages in source order.
    The first failing source aborts the whole run.
    """
    passages: list[Passage] = []
    for source in sources:
        try:
            texts = [text for _, text in load(source.pattern)]
            chunks = chunk_texts(texts, chunk_size=chunk_size, source=source.pattern)
        except (LoadError, NoContentExtracted) as e:
            raise IngestionError(
                source.label, f"Failed to load {source.label} ({source.pattern}): {e}"
            ) from e

        passages.extend(assign_ids(source.label, chunks))
        logger.info(f"{INGEST} {source.label}: {len(texts)} file(s), {len(chunks)} passages")

    logger.info(f"{INGEST} Successfully loaded and chunked {len(passages)} passages")
    return passages


def make_embeddings(model_name: str = EMB_MODEL) -> Embeddings:
    from langchain_huggingface import HuggingFaceEmbeddings

    logger.info(f"{EMBEDDING} Using embedding model {model_name}")
    try:
        return HuggingFaceEmbeddings(model_name=model_name)
    except Exception as e:
        raise EmbeddingServiceError(f"Could not load embedding model {model_name!r}: {e}") from e


def build_index(passages: Sequence[Passage], embeddings: Embeddings) -> FAISS:
    """
    Embed all passages in one batch and index them by passage id.
    Any embedding failure discards the batch.
    """
    if not passages:
        raise EmbeddingServiceError("No passages to embed")

    docs = [
        Document(page_content=p.content, metadata={"id": p.id, "source": p.id.rsplit("_", 1)[0]})
        for p in passages
    ]
    try:
        vectorstore = FAISS.from_documents(docs, embeddings, ids=[p.id for p in passages])
    except Exception as e:
        raise EmbeddingServiceError(f"Embedding {len(docs)} passages failed: {e}") from e

    logger.info(f"{EMBEDDING} Successfully generated embeddings for {len(docs)} passages")
    logger.info(f"{VECTOR_DB} Successfully created vector store and index")
    return vectorstore


def search(index: FAISS, query_vector: Sequence[float], k: int = 4) -> list[SearchHit]:
    """Top-k passages nearest to `query_vector` (L2 distance, closest first)."""
    results = index.similarity_search_with_score_by_vector(list(query_vector), k=k)
    return [
        SearchHit(id=doc.metadata["id"], content=doc.page_content, score=float(score))
        for doc, score in results
    ]
