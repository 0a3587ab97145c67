# qa_app.py
"""
Chat agent over the in-memory vector store:
    • retrieves the top‑k passages for a question
    • stuffs them, tagged by id, under a fixed preamble
    • runs PromptTemplate | llm | StrOutputParser
"""
from typing import Sequence

from langchain_core.documents import Document
from langchain_core.language_models import BaseLanguageModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import PromptTemplate
from langchain_core.runnables import Runnable
from langchain_core.vectorstores import VectorStore

from errors import AgentError
from log import CHAT, get_logger
from settings import CHAT_MODEL, DEFAULT_TOP_K

logger = get_logger(__name__)

PREAMBLE = (
    "You are a helpful assistant that answers questions based on the provided "
    "document context. When answering questions, try to synthesize information "
    "from multiple chunks if they're related."
)

PROMPT = PromptTemplate(
    input_variables=["preamble", "context", "question"],
    template=(
        "{preamble}\n\n"
        "Context:\n{context}\n\n"
        "Question: {question}\n"
        "Answer:"
    ),
)


def build_llm(model_id: str = CHAT_MODEL) -> BaseLanguageModel:
    """GPU‑aware seq2seq text2text pipeline wrapped for LangChain."""
    import torch
    from langchain_huggingface import HuggingFacePipeline
    from transformers import AutoModelForSeq2SeqLM, AutoTokenizer, Text2TextGenerationPipeline

    logger.info(f"{CHAT} Loading chat model {model_id}")
    on_gpu = torch.cuda.is_available()
    try:
        tokenizer = AutoTokenizer.from_pretrained(model_id)
        model = AutoModelForSeq2SeqLM.from_pretrained(
            model_id,
            device_map="auto",          # Accelerate chooses the GPU(s)
            torch_dtype=torch.float16 if on_gpu else torch.float32,
            low_cpu_mem_usage=True,
        )
    except Exception as e:
        raise AgentError(f"Could not load chat model {model_id!r}: {e}") from e
    hf_pipe = Text2TextGenerationPipeline(
        model=model,
        tokenizer=tokenizer,
        max_length=256,
        do_sample=False,      # deterministic beam search
        num_beams=4,
        early_stopping=True,
        truncation=True,
    )
    hf_pipe.task = "text2text-generation"
    return HuggingFacePipeline(pipeline=hf_pipe)


def format_context(docs: Sequence[Document]) -> str:
    """Render retrieved passages, each headed by its passage id."""
    return "\n\n".join(
        f"[{doc.metadata.get('id', i)}]\n{doc.page_content}" for i, doc in enumerate(docs)
    )


class RagAgent:
    """Answers questions from the `k` nearest passages in `index`."""

    def __init__(
        self,
        index: VectorStore,
        llm: BaseLanguageModel | Runnable,
        *,
        k: int = DEFAULT_TOP_K,
        preamble: str = PREAMBLE,
    ) -> None:
        if k < 1:
            raise ValueError("k must be >= 1")
        self.k = k
        self.preamble = preamble
        self.retriever = index.as_retriever(search_kwargs={"k": k})
        self.chain = PROMPT | llm | StrOutputParser()

    def retrieve(self, question: str) -> list[Document]:
        return self.retriever.invoke(question)

    def answer(self, question: str) -> str:
        """Retrieve top‑k passages and generate a reply; failures raise AgentError."""
        question = (question or "").strip()
        if not question:
            return "Please enter a question."

        try:
            docs = self.retrieve(question)
            logger.debug(f"{CHAT} Retrieved {[d.metadata.get('id') for d in docs]}")
            return self.chain.invoke(
                {"preamble": self.preamble, "context": format_context(docs), "question": question}
            ).strip()
        except Exception as e:
            raise AgentError(f"Could not answer {question!r}: {e}") from e
