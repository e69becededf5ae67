"""Renshuu Worksheet Generator - Main Application

Gradio application for generating handwriting practice worksheets from an
uploaded TrueType font.
"""
import os
import sys
from datetime import datetime

# Add current directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import gradio as gr
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from renshuu.config import DEFAULT_OUTPUT_FILENAME, PROGRESS_STEPS, SUPPORTED_FONT_EXTENSIONS
from renshuu.logging_config import setup_logging_from_env
from renshuu.pipeline import WorksheetPipeline
from renshuu.utils import clean_filename, split_characters
from renshuu.worksheet_options import WorksheetOptions

setup_logging_from_env()

OUTPUT_DIR = os.getenv("RENSHUU_OUTPUT_DIR", "outputs")


def generate_worksheet(font_file, characters_text: str, progress=gr.Progress()) -> tuple:
    """
    Generate a practice worksheet.

    Args:
        font_file: Uploaded font file path from gr.File
        characters_text: Characters to practice; whitespace is ignored
        progress: Gradio progress tracker

    Returns:
        Tuple of (output PDF path, status message)
    """
    if font_file is None:
        raise gr.Error("Please upload a TrueType font (.ttf or .otf)")

    font_path = font_file if isinstance(font_file, str) else font_file.name
    characters = split_characters(characters_text)
    if not characters:
        gr.Warning("No characters entered; the worksheet will be a blank page")

    # Each run gets its own file so concurrent users don't overwrite each other
    os.makedirs(OUTPUT_DIR, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    base_name, _ = os.path.splitext(DEFAULT_OUTPUT_FILENAME)
    output_path = os.path.join(
        OUTPUT_DIR, f"{base_name}_{clean_filename(font_path)}_{timestamp}.pdf"
    )

    options = WorksheetOptions(
        font_path=font_path,
        characters=characters,
        output_path=output_path,
        original_filename=os.path.basename(font_path),
    )

    pipeline = WorksheetPipeline(progress_callback=lambda p, d: progress(p, desc=d))
    result = pipeline.process(options)

    if result.is_failed:
        raise gr.Error(result.status_message)

    progress(PROGRESS_STEPS["COMPLETE"], desc="Done")
    return result.to_gradio_outputs()


with gr.Blocks(title="Renshuu") as app:
    gr.Markdown("# ✍️ Renshuu")
    gr.Markdown(
        "Handwriting practice sheets in your own font. Each character gets a column "
        "of full-size boxes plus half- and quarter-size grids, eight characters per page."
    )

    with gr.Row():
        with gr.Column():
            font_input = gr.File(
                label="Font (.ttf, .otf)",
                file_types=list(SUPPORTED_FONT_EXTENSIONS),
                type="filepath",
            )
            characters_input = gr.Textbox(
                label="Characters",
                placeholder="あいうえお",
                lines=4,
            )
            generate_btn = gr.Button("Generate worksheet", variant="primary")

        with gr.Column():
            output_file = gr.File(label="Worksheet PDF")
            status = gr.Textbox(label="Status", interactive=False)

    generate_btn.click(
        fn=generate_worksheet,
        inputs=[font_input, characters_input],
        outputs=[output_file, status],
    )


if __name__ == "__main__":
    app.launch()
