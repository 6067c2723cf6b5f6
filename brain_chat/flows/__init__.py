"""Query pipeline: intent classifier, response normalizer and the LangGraph that chains them."""

from brain_chat.flows.classifier import classify
from brain_chat.flows.graph import build_pipeline, run_pipeline
from brain_chat.flows.normalizer import normalize

__all__ = ["classify", "normalize", "build_pipeline", "run_pipeline"]
