"""
Upload a recording to the note generation service and print the SOAP note.

Usage:
    soapview visit.wav --save notes/
"""
import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .client import NoteUploadClient, NoteUploadError
from .export import build_clipboard_text, build_download_filename, build_download_text
from .formatter import fragments_to_markdown
from .render_service import render_note
from .schemas import ClinicalNote
from .utils.logger import configure_logging


def format_for_terminal(note: ClinicalNote) -> str:
    """Lay out the transcription and every non-empty section as Markdown."""
    rendered = render_note(note.soap_note, note.transcription)
    blocks = [f"## Transcription\n\n{rendered.transcription}"]
    for section in rendered.sections:
        blocks.append(f"## [{section.letter}] {section.title}\n\n{fragments_to_markdown(section.fragments)}")
    return "\n\n".join(blocks)


def save_export(note: ClinicalNote, directory: str) -> Path:
    target_dir = Path(directory)
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / build_download_filename()
    path.write_text(build_download_text(note), encoding="utf-8")
    logger.info(f"Saved clinical note to {path}")
    return path


async def run(args: argparse.Namespace) -> int:
    client = NoteUploadClient(endpoint=args.endpoint)
    try:
        note = await client.upload_audio(args.audio)
    except NoteUploadError as e:
        print(e.message, file=sys.stderr)
        return 1

    print(format_for_terminal(note))
    if args.copy_text:
        print("\n" + build_clipboard_text(note))
    if args.save:
        print(f"\nSaved to {save_export(note, args.save)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate and display a SOAP clinical note from an audio recording")
    parser.add_argument("audio", help="Path of the audio recording (MP3, WAV, M4A)")
    parser.add_argument("--endpoint", default=None, help="Base URL of the note generation service")
    parser.add_argument("--save", metavar="DIR", default=None, help="Write the text export into DIR")
    parser.add_argument("--copy-text", action="store_true", help="Also print the plain text used for copying")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
