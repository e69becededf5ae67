"""Worksheet Pipeline

Main orchestration logic for the worksheet workflow.
"""
import logging
import os
from typing import Callable, Optional

from .config import PROGRESS_STEPS
from .exceptions import PipelineStepError
from .paper_profile import get_paper_profile
from .utils import check_file_size_limit, format_file_size, validate_font_path
from .worksheet_builder import FontDescriptor, WorksheetBuilder, page_count
from .worksheet_options import WorksheetOptions
from .worksheet_result import WorksheetResult

logger = logging.getLogger(__name__)


class WorksheetPipeline:
    """Worksheet generation pipeline orchestrator.

    This class runs the complete workflow:
    1. Validation - font file exists, has a supported extension and size
    2. Font loading - read the file and resolve its name
    3. Generation - lay out every character and export the PDF

    Attributes:
        progress_callback: Optional callback for progress updates (progress, desc)
    """

    def __init__(self, progress_callback: Optional[Callable[[float, str], None]] = None):
        """Initialize pipeline with an optional progress callback.

        Args:
            progress_callback: Optional function(progress: float, desc: str) for progress updates
        """
        self.progress = progress_callback or (lambda p, d: None)

    def process(self, options: WorksheetOptions) -> WorksheetResult:
        """Execute the complete worksheet pipeline.

        Args:
            options: Worksheet configuration options

        Returns:
            WorksheetResult with output path and status

        Raises:
            Does not raise - all errors are captured in WorksheetResult.error
        """
        # Never delete a file this run did not create
        output_existed = os.path.exists(options.output_path)

        try:
            self.progress(PROGRESS_STEPS["VALIDATE"], "Validating font file...")
            self._run_step("validate", self._validate_file, options)

            builder = WorksheetBuilder(
                options.output_path,
                paper_profile=get_paper_profile(options.paper),
            )

            self.progress(PROGRESS_STEPS["LOAD_FONT"], "Reading font...")
            font: FontDescriptor = self._run_step(
                "load_font",
                builder.load_font,
                options.font_path,
                source_name=options.original_filename,
            )

            self.progress(PROGRESS_STEPS["LAYOUT"], f"Laying out {len(options.characters)} characters...")
            output_path = self._run_step("generate", builder.generate, font, options.characters)

            self.progress(PROGRESS_STEPS["COMPLETE"], "Complete!")

            pages = page_count(len(options.characters))
            return WorksheetResult(
                status="completed",
                status_message=f"✅ Worksheet ready: {pages} page(s) using font '{font.display_name}'",
                output_pdf_path=output_path,
                font_name=font.display_name,
                character_count=len(options.characters),
                page_count=pages,
            )

        except Exception as e:
            logger.error(f"Worksheet generation failed: {e}")
            if not output_existed:
                self._cleanup_partial_output(options.output_path)

            return WorksheetResult(
                status="failed",
                status_message=f"Generation failed: {str(e)}",
                error=str(e),
            )

    def _run_step(self, step_name: str, func: Callable, *args, **kwargs):
        """Run one pipeline step, tagging any failure with the step name.

        Raises:
            PipelineStepError: Wrapping whatever the step raised
        """
        try:
            return func(*args, **kwargs)
        except Exception as e:
            raise PipelineStepError(step_name, e) from e

    def _validate_file(self, options: WorksheetOptions) -> float:
        """Validate font file exists, has a supported extension and is within size limit.

        Returns:
            File size in MB

        Raises:
            InvalidFileError: If file doesn't exist or has wrong extension
            FileSizeLimitExceededError: If file exceeds size limit
        """
        validate_font_path(options.font_path, display_name=options.original_filename)
        size_mb = check_file_size_limit(options.font_path)
        logger.info(f"Font file OK: {format_file_size(os.path.getsize(options.font_path))}")
        return size_mb

    def _cleanup_partial_output(self, output_path: str):
        """Remove an output file left behind by a failed export."""
        if output_path and os.path.exists(output_path):
            try:
                os.remove(output_path)
            except OSError as e:
                logger.warning(f"Could not remove partial output {output_path}: {e}")
