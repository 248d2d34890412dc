#!/usr/bin/env python3
"""
CLI for the text simulation engine.

Usage:
    python -m simlab.cli --help
    python -m simlab.cli chunk "Some long text" --size 10 --overlap 2
    python -m simlab.cli tokenize "Preprocessing is interesting" --model gpt4o
    python -m simlab.cli search "How long is battery life?"
    python -m simlab.cli quantize --level int8
    python -m simlab.cli tool "Check the weather in London"
    python -m simlab.cli ocr invoice --mode legacy
    python -m simlab.cli chat "hello" --persona pirate
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .catalog.agents import DEFAULT_PERSONA, OCR_DOCUMENTS, PERSONAS
from .catalog.models import DEFAULT_MODEL, MODEL_CATALOG
from .catalog.quantization import SAMPLE_WEIGHTS
from .catalog.vocabulary import DIMENSION_DESCRIPTIONS, DIMENSION_LABELS
from .config.config_loader import SimLabConfig
from .core.exceptions import SimLabError
from .core.logging import configure_logging
from .core.types import QuantizationLevel
from .engine import SimulationEngine
from .generation.vision import ScanMode


def setup_logging(config: SimLabConfig, verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else config.get_log_level()
    configure_logging(level=level, structured=bool(config.get("logging.structured", False)))


def cmd_chunk(engine: SimulationEngine, args: argparse.Namespace) -> int:
    """Split text into chunks."""
    records = engine.chunk_records(args.text, size=args.size, overlap=args.overlap, smart=args.smart)
    
    if args.json:
        print(json.dumps([r.to_dict() for r in records], indent=2))
        return 0
    
    print(f"\n{len(records)} chunks")
    print("=" * 50)
    for r in records:
        print(f"[{r.chunk_index + 1}] ({r.start_offset}-{r.end_offset}) {r.content!r}")
    return 0


def cmd_tokenize(engine: SimulationEngine, args: argparse.Namespace) -> int:
    """Tokenize text for a catalog model."""
    tokens = engine.tokenize_for_model(args.text, args.model)
    usage = engine.usage(args.text, args.model)
    
    if args.json:
        print(json.dumps({"tokens": tokens, "usage": usage.to_dict()}, indent=2))
        return 0
    
    spec = MODEL_CATALOG[args.model]
    print(f"\nTokens for {spec.name}")
    print("=" * 50)
    print(" | ".join(repr(t) for t in tokens))
    print(f"\nCount:          {usage.token_count}")
    print(f"Cost:           ${usage.input_cost:.6f}")
    print(f"Context Window: {spec.context_label}")
    print(f"Context Usage:  {usage.context_usage_pct:.6f}%")
    print(f"Max Output:     {usage.max_output:,}")
    return 0


def cmd_embed(engine: SimulationEngine, args: argparse.Namespace) -> int:
    """Embed a word."""
    vector = engine.embed(args.word)
    
    if args.json:
        print(json.dumps({"word": args.word, "vector": vector}))
        return 0
    
    print(f"\n[{', '.join(f'{v:.3f}' for v in vector)}]")
    for label, value, description in zip(DIMENSION_LABELS, vector, DIMENSION_DESCRIPTIONS):
        print(f"  {label:<6} {value:.3f}  {description}")
    return 0


def cmd_search(engine: SimulationEngine, args: argparse.Namespace) -> int:
    """Search the reference knowledge base."""
    if args.keyword:
        session = engine.rag_session()
        result = session.retrieve(args.query)
    else:
        result = engine.search(args.query)
    
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0
    
    if result.is_match:
        label = "MATCH FOUND" if args.keyword else "SEMANTIC MATCH"
        score = f"{result.score}" if args.keyword else f"{result.score:.3f}"
        print(f"\n{label} (Score {score})")
        print(f'"{result.best.text}"')
        if args.keyword:
            print(f"\nAI ANSWER: {session.answer()}")
    else:
        print("\nNO MATCH FOUND")
        if not args.keyword:
            print(f"Max Score: {result.score:.3f}")
    return 0


def cmd_quantize(engine: SimulationEngine, args: argparse.Namespace) -> int:
    """Quantize the sample weight matrix."""
    weights = args.weights or list(SAMPLE_WEIGHTS)
    quantized = engine.quantize(weights, args.level)
    profile = engine.quantization_profile(args.level)
    
    if args.json:
        print(json.dumps({
            "level": QuantizationLevel.coerce(args.level).value,
            "weights": [q.display_value for q in quantized],
            "model_size": profile.memory_size,
            "ram_required": profile.ram_required,
            "precision_loss": profile.precision_loss,
            "hardware": profile.recommended_hardware,
        }, indent=2))
        return 0
    
    print(f"\n{profile.label} weight matrix")
    print("=" * 50)
    for i in range(0, len(quantized), 4):
        print("  ".join(f"{q.display_value:>12}" for q in quantized[i:i + 4]))
    print(f"\nModel Size:     {profile.memory_size}")
    print(f"RAM Required:   {profile.ram_required}")
    print(f"Precision Loss: {profile.precision_loss}")
    print(f"Run on:         {profile.recommended_hardware}")
    return 0


def cmd_predict(engine: SimulationEngine, args: argparse.Namespace) -> int:
    """Predict the next token."""
    prediction = engine.predict(args.text, args.temperature)
    
    if args.json:
        print(json.dumps({
            "last_word": prediction.last_word,
            "candidates": [{"word": c.word, "pct": c.pct} for c in prediction.candidates],
            "selected": prediction.selected.word if prediction.selected else None,
        }, indent=2))
        return 0
    
    for c in prediction.candidates:
        print(f"{c.word!r:>16} {'#' * (c.pct // 5):<20} {c.pct}%")
    if prediction.selected:
        print(f'\nSelected: "{prediction.selected.word}"')
    return 0


def cmd_tool(engine: SimulationEngine, args: argparse.Namespace) -> int:
    """Route a command to a simulated tool."""
    call = engine.route_tool(args.query)
    
    if args.json:
        print(json.dumps(call.to_dict(), indent=2, ensure_ascii=False))
        return 0
    
    print(f"\nThought: {call.thought}")
    if call.is_tool_call:
        print(f"Tool:    {call.tool}")
    print(f"Result:  {call.result}")
    return 0


def cmd_ocr(engine: SimulationEngine, args: argparse.Namespace) -> int:
    """Scan a sample document."""
    result = engine.scan_document(args.doc_type, args.mode)
    
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0
    
    print(result.text)
    return 0


def cmd_chat(engine: SimulationEngine, args: argparse.Namespace) -> int:
    """Send one message under a persona."""
    chat = engine.persona_chat(args.persona)
    response = chat.send(args.message)
    
    if args.json:
        print(json.dumps({
            "persona": chat.persona,
            "system_prompt": chat.prompt,
            "message": args.message,
            "response": response,
        }, indent=2))
        return 0
    
    print(f'\nSystem: "{chat.prompt}"')
    print(f"> {args.message}")
    print(response)
    return 0


def cmd_ping(engine: SimulationEngine, args: argparse.Namespace) -> int:
    """Compare local and cloud latency."""
    report = engine.ping()
    
    if args.json:
        print(json.dumps(report.to_dict()))
        return 0
    
    print(f"\nLocal: {report.local_label}")
    print(f"Cloud: {report.cloud_label}")
    return 0


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Text simulation engine CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--config", type=Path, help="YAML config file")
    
    subparsers = parser.add_subparsers(dest="command", help="Commands")
    
    chunk_parser = subparsers.add_parser("chunk", help="Split text into chunks")
    chunk_parser.add_argument("text", help="Text to chunk")
    chunk_parser.add_argument("--size", type=int, help="Chunk size in characters")
    chunk_parser.add_argument("--overlap", type=int, help="Overlap in characters")
    chunk_parser.add_argument("--smart", action="store_true", default=None, help="Boundary-aware chunking")
    chunk_parser.add_argument("--json", action="store_true", help="Output JSON")
    chunk_parser.set_defaults(func=cmd_chunk)
    
    tokenize_parser = subparsers.add_parser("tokenize", help="Tokenize text")
    tokenize_parser.add_argument("text", help="Text to tokenize")
    tokenize_parser.add_argument(
        "--model", choices=sorted(MODEL_CATALOG), default=DEFAULT_MODEL, help="Tokenizer model"
    )
    tokenize_parser.add_argument("--json", action="store_true", help="Output JSON")
    tokenize_parser.set_defaults(func=cmd_tokenize)
    
    embed_parser = subparsers.add_parser("embed", help="Embed a word")
    embed_parser.add_argument("word", help="Word to embed")
    embed_parser.add_argument("--json", action="store_true", help="Output JSON")
    embed_parser.set_defaults(func=cmd_embed)
    
    search_parser = subparsers.add_parser("search", help="Search the knowledge base")
    search_parser.add_argument("query", help="Query text")
    search_parser.add_argument("--keyword", action="store_true", help="Keyword overlap ranking")
    search_parser.add_argument("--json", action="store_true", help="Output JSON")
    search_parser.set_defaults(func=cmd_search)
    
    quantize_parser = subparsers.add_parser("quantize", help="Quantize sample weights")
    quantize_parser.add_argument(
        "--level", choices=[lvl.value for lvl in QuantizationLevel], default="fp32", help="Precision level"
    )
    quantize_parser.add_argument("--weights", type=float, nargs="+", help="Weights to quantize")
    quantize_parser.add_argument("--json", action="store_true", help="Output JSON")
    quantize_parser.set_defaults(func=cmd_quantize)
    
    predict_parser = subparsers.add_parser("predict", help="Predict the next token")
    predict_parser.add_argument("text", help="Prompt text")
    predict_parser.add_argument("--temperature", type=float, default=0.7, help="Sampling temperature")
    predict_parser.add_argument("--json", action="store_true", help="Output JSON")
    predict_parser.set_defaults(func=cmd_predict)
    
    tool_parser = subparsers.add_parser("tool", help="Route a command to a tool")
    tool_parser.add_argument("query", help="Command text")
    tool_parser.add_argument("--json", action="store_true", help="Output JSON")
    tool_parser.set_defaults(func=cmd_tool)
    
    ocr_parser = subparsers.add_parser("ocr", help="Scan a sample document")
    ocr_parser.add_argument("doc_type", choices=sorted(OCR_DOCUMENTS), help="Document to scan")
    ocr_parser.add_argument(
        "--mode", choices=[m.value for m in ScanMode], default=ScanMode.VISION.value, help="Scan mode"
    )
    ocr_parser.add_argument("--json", action="store_true", help="Output JSON")
    ocr_parser.set_defaults(func=cmd_ocr)
    
    chat_parser = subparsers.add_parser("chat", help="Chat under a system-prompt persona")
    chat_parser.add_argument("message", help="User message")
    chat_parser.add_argument("--persona", choices=sorted(PERSONAS), default=DEFAULT_PERSONA, help="Persona")
    chat_parser.add_argument("--json", action="store_true", help="Output JSON")
    chat_parser.set_defaults(func=cmd_chat)
    
    ping_parser = subparsers.add_parser("ping", help="Compare local and cloud latency")
    ping_parser.add_argument("--json", action="store_true", help="Output JSON")
    ping_parser.set_defaults(func=cmd_ping)

    
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        return 1
    
    try:
        config = SimLabConfig(args.config)
        setup_logging(config, args.verbose)
        engine = SimulationEngine(config)
        return args.func(engine, args)
    except (SimLabError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
