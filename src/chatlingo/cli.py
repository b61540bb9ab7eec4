from __future__ import annotations
import asyncio
from pathlib import Path
from typing import Optional
import httpx
import typer
from rich.console import Console
from rich.table import Table
from rich import box
from .chat import ChatSession, render_message
from .config import ChatConfig, write_default_config
from .summarizer import summarize as summarize_text
from .translator import (
    TRANSLATION_UNAVAILABLE, UNKNOWN_LANGUAGE,
    detect_language, display, make_client, translate_text,
)
from .utils import clip, setup_logging

app = typer.Typer(help="Chat with language detection, translation and summaries")
console = Console()

# Tests swap in an httpx.MockTransport here
TRANSPORT: Optional[httpx.AsyncBaseTransport] = None

def _load_config(config_path: Optional[Path]) -> ChatConfig:
    if config_path and config_path.exists():
        return ChatConfig.load(config_path)
    return ChatConfig()

def _read_text(text: Optional[str], file: Optional[Path]) -> str:
    if file is not None and text is not None:
        typer.echo("Provide either TEXT or --file, not both")
        raise typer.Exit(code=2)
    if file is not None:
        return file.read_text(encoding="utf-8")
    if text is None:
        typer.echo("Provide TEXT or --file")
        raise typer.Exit(code=2)
    return text

@app.callback()
def main_options(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")):
    setup_logging(verbose)

@app.command()
def init(
    config_path: Path = typer.Option("config.json", exists=False, help="Where to create config"),
):
    """Create default config."""
    try:
        write_default_config(config_path)
    except FileExistsError as ex:
        console.print(f"[red]{ex}[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]Created[/green] {config_path}")

@app.command()
def summarize(
    text: Optional[str] = typer.Argument(None, help="Text to summarize"),
    file: Optional[Path] = typer.Option(None, exists=True, help="Read text from a file"),
    sentences: int = typer.Option(3, min=1, help="Number of sentences"),
):
    """Create an extractive summary."""
    console.print(summarize_text(_read_text(text, file), sentences))

@app.command()
def detect(
    text: str = typer.Argument(..., help="Text to inspect"),
    config_path: Optional[Path] = typer.Option("config.json"),
):
    """Detect the language of TEXT."""
    cfg = _load_config(config_path)

    async def _run():
        async with make_client(cfg, TRANSPORT) as client:
            return await detect_language(client, cfg, text)

    console.print(display(asyncio.run(_run()), UNKNOWN_LANGUAGE))

@app.command()
def translate(
    text: str = typer.Argument(..., help="Text to translate"),
    to: str = typer.Option("en", "--to", help="Target language"),
    config_path: Optional[Path] = typer.Option("config.json"),
):
    """Translate TEXT into another language."""
    cfg = _load_config(config_path)
    if to not in cfg.languages:
        console.print(f"[red]Unsupported language {to}[/red] (choose from {', '.join(cfg.languages)})")
        raise typer.Exit(code=2)

    async def _run():
        async with make_client(cfg, TRANSPORT) as client:
            return await translate_text(client, cfg, text, to)

    console.print(display(asyncio.run(_run()), TRANSLATION_UNAVAILABLE))

def _options_table(session: ChatSession) -> Table:
    turn = session.state.turns[-1]
    table = Table(title=clip(turn.text), box=box.SIMPLE)
    table.add_column("Command", style="bold")
    table.add_column("Action")
    table.add_row("/t <lang>", "Translate (" + ", ".join(lang.upper() for lang in session.cfg.languages) + ")")
    if turn.can_summarize:
        table.add_row("/s", "Summarize")
    table.add_row("/q", "Quit")
    return table

async def _chat_loop(cfg: ChatConfig) -> None:
    async with make_client(cfg, TRANSPORT) as client:
        session = ChatSession(cfg, client)
        shown = 0
        while True:
            try:
                line = await asyncio.to_thread(console.input, "[bold]> [/bold]")
            except EOFError:
                break
            cmd = line.strip()
            sent = False
            try:
                if cmd == "/q":
                    break
                elif cmd == "/t" or cmd.startswith("/t "):
                    if not session.state.turns:
                        console.print("[yellow]Nothing to translate yet[/yellow]")
                        continue
                    target = cmd[2:].strip().lower() or "en"
                    await session.translate(len(session.state.turns) - 1, target)
                elif cmd == "/s":
                    if not session.state.turns:
                        console.print("[yellow]Nothing to summarize yet[/yellow]")
                        continue
                    session.summarize(len(session.state.turns) - 1)
                else:
                    await session.send(line)
                    sent = True
            except ValueError as ex:
                console.print(f"[red]{ex}[/red]")
                continue

            if session.state.error:
                console.print(f"[red]{session.state.error}[/red]")
                continue
            for msg in session.state.messages[shown:]:
                style = "green" if msg.sender == "You" else "cyan"
                console.print(render_message(msg), style=style, markup=False, highlight=False)
            shown = len(session.state.messages)
            if sent and session.state.turns:
                console.print(_options_table(session))

@app.command()
def chat(
    config_path: Optional[Path] = typer.Option("config.json"),
):
    """Interactive chat session."""
    cfg = _load_config(config_path)
    asyncio.run(_chat_loop(cfg))
    console.print("[green]Bye.[/green]")

def main():
    app()

if __name__ == "__main__":
    main()
