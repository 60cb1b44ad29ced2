"""Output handling utilities for rbxstats"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional
from rich.console import Console
from rich.markup import escape
from rich.table import Table
import pyperclip

console = Console()


def resolve_pretty(pretty: Optional[bool]) -> bool:
    """Default to pretty output only when writing to a terminal"""
    if pretty is None:
        return sys.stdout.isatty()
    return pretty


def display_mapping(mapping: Dict[str, str], title: str = "", pretty: bool = True):
    """Display a flat response mapping in the terminal"""
    if not mapping:
        console.print("[yellow]No data returned[/yellow]")
        return

    if not pretty:
        # Plain output for pipes or non-interactive
        for key, value in mapping.items():
            print(f"{key}: {value}")
        return

    table = Table(title=escape(title) if title else None, show_header=True, header_style="bold")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")
    for key, value in mapping.items():
        table.add_row(escape(key), escape(value))
    console.print(table)


def save_to_file(content: Any, filepath: str, format_type: str = 'text'):
    """Save content to a file"""
    path = Path(filepath)

    # Create parent directories if they don't exist
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w', encoding='utf-8') as f:
        if format_type == 'json' and not isinstance(content, str):
            json.dump(content, f, indent=2)
        else:
            f.write(str(content))

    console.print(f"[green]✓ Saved to {filepath}[/green]")


def copy_to_clipboard(content: Any):
    """Copy content to clipboard"""
    try:
        text = str(content) if not isinstance(content, str) else content
        pyperclip.copy(text)
        console.print("[green]✓ Copied to clipboard[/green]")
    except pyperclip.PyperclipException as e:
        console.print(f"[red]Failed to copy to clipboard: {e}[/red]")


def handle_output(
    mapping: Dict[str, str],
    title: str = "",
    output_file: Optional[str] = None,
    copy: bool = False,
    json_output: bool = False,
    pretty: bool = True,
):
    """Handle all output options for a response mapping"""
    if json_output or output_file:
        text = json.dumps(mapping, indent=2 if pretty else None, ensure_ascii=False)
    else:
        text = "\n".join(f"{key}: {value}" for key, value in mapping.items())

    if output_file:
        save_to_file(text, output_file, 'json')

    if copy:
        copy_to_clipboard(text)

    if json_output and not output_file:
        if pretty:
            console.print_json(text)
        else:
            print(text)
    elif not output_file:
        display_mapping(mapping, title, pretty)
