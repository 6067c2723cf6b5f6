"""LangGraph construction and node implementations for the query pipeline.

classify -> dispatch -> normalize, one linear pass per submission.
Exceptions raised by a node propagate out of the graph unchanged; the
conversation agent is the boundary that converts them into error entries.
"""

from __future__ import annotations

from typing import Tuple

from langgraph.graph import END, StateGraph
from langgraph.graph.state import CompiledStateGraph

from brain_chat.domain.intents import Intent
from brain_chat.flows.classifier import classify
from brain_chat.flows.normalizer import normalize
from brain_chat.flows.state import PipelineState
from brain_chat.infrastructure.logging.logger import logger
from brain_chat.providers.base import BrainClient


def classify_node(state: PipelineState) -> PipelineState:
    intent = classify(state["text"])
    logger.info("classify_node.end", extra={"extra": {"intent": intent.type}})
    return {"intent": intent}


async def dispatch_node(state: PipelineState, client: BrainClient) -> PipelineState:
    logger.info("dispatch_node.start", extra={"extra": {"client": client.name}})
    raw = await client.dispatch(state["intent"])
    return {"raw": raw}


def normalize_node(state: PipelineState) -> PipelineState:
    return {"content": normalize(state.get("raw"), state["intent"])}


def build_pipeline(client: BrainClient) -> CompiledStateGraph:
    async def dispatch(state: PipelineState) -> PipelineState:
        return await dispatch_node(state, client)

    graph = StateGraph(PipelineState)
    graph.add_node("classify", classify_node)
    graph.add_node("dispatch", dispatch)
    graph.add_node("normalize", normalize_node)
    graph.set_entry_point("classify")
    graph.add_edge("classify", "dispatch")
    graph.add_edge("dispatch", "normalize")
    graph.add_edge("normalize", END)
    return graph.compile()


async def run_pipeline(pipeline: CompiledStateGraph, text: str) -> Tuple[Intent, str]:
    """Run one submission through the graph, return (intent, display text)."""

    result = await pipeline.ainvoke({"text": text})
    return result["intent"], result["content"]
