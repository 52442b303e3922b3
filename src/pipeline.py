"""
Pipeline Orchestrator - Coordinates load, trace and render
"""
from pathlib import Path
from typing import Optional, Callable, List, Tuple
from dataclasses import dataclass
from enum import Enum
import logging
from datetime import datetime

logger = logging.getLogger(__name__)


class PipelineStage(Enum):
    INGESTION = "ingestion"
    VECTORIZATION = "vectorization"
    EXPORT = "export"


@dataclass
class PipelineConfig:
    """Configuration for pipeline execution"""
    # Input
    input_path: Path

    # Binarization
    background: Tuple[int, int, int, int] = (255, 255, 255, 255)

    # Export
    output_path: Path = Path("out.png")
    render_mode: str = "path"  # "path" or "grid"


@dataclass
class PipelineResult:
    """Result of pipeline execution"""
    success: bool
    output_files: List[Path]
    stages_completed: List[PipelineStage]
    error: Optional[str] = None
    timing: Optional[dict] = None
    metadata: Optional[dict] = None


class Pipeline:
    """
    Main pipeline orchestrator for contour extraction.

    Pipeline stages:
    1. Ingestion: Decode the image to RGBA
    2. Vectorization: Binarize, build the cell grid, trace the contour
    3. Export: Render the path (or the grid) to PNG

    Stages run once, in order, on a single thread.
    """

    def __init__(self, config: PipelineConfig):
        self.config = config
        self._progress_callback: Optional[Callable] = None
        self._current_stage: Optional[PipelineStage] = None
        self._timing: dict = {}

    def set_progress_callback(self, callback: Callable[[PipelineStage, float, str], None]):
        """
        Set callback for progress updates.

        Callback signature: (stage: PipelineStage, progress: float, message: str)
        """
        self._progress_callback = callback

    def _report_progress(self, progress: float, message: str):
        """Report progress to callback if set"""
        if self._progress_callback and self._current_stage:
            self._progress_callback(self._current_stage, progress, message)

    def _timed(self, stage: PipelineStage, func, *args):
        self._current_stage = stage
        started = datetime.now()
        result = func(*args)
        self._timing[stage.value] = (datetime.now() - started).total_seconds()
        return result

    def run(self) -> PipelineResult:
        """
        Execute the full pipeline.

        Returns:
            PipelineResult with output files and status
        """
        logger.info(f"Starting pipeline for: {self.config.input_path}")
        stages_completed = []
        start_time = datetime.now()

        try:
            image = self._timed(PipelineStage.INGESTION, self._run_ingestion)
            stages_completed.append(PipelineStage.INGESTION)

            vector_data = self._timed(PipelineStage.VECTORIZATION, self._run_vectorization, image)
            stages_completed.append(PipelineStage.VECTORIZATION)

            output_file = self._timed(PipelineStage.EXPORT, self._run_export, vector_data)
            stages_completed.append(PipelineStage.EXPORT)

            elapsed = (datetime.now() - start_time).total_seconds()
            logger.info(f"Pipeline completed in {elapsed:.3f}s")

            return PipelineResult(
                success=True,
                output_files=[output_file],
                stages_completed=stages_completed,
                timing=self._timing,
                metadata={
                    "path_length": len(vector_data.path),
                    "trace_status": vector_data.status.value,
                    "grid_size": (vector_data.grid.width, vector_data.grid.height),
                    "image_format": image.format,
                },
            )

        except Exception as e:
            logger.error(f"Pipeline failed at {self._current_stage}: {e}")
            return PipelineResult(
                success=False,
                output_files=[],
                stages_completed=stages_completed,
                error=str(e),
                timing=self._timing,
            )

    def _run_ingestion(self):
        """Stage 1: Load input image"""
        from .ingestion import ImageLoader

        self._report_progress(0.0, "Loading image...")
        image = ImageLoader().load(self.config.input_path)
        self._report_progress(1.0, "Image loaded")
        return image

    def _run_vectorization(self, image):
        """Stage 2: Trace the contour"""
        from .vectorization import RasterToVector

        self._report_progress(0.0, "Tracing contour...")
        vector_data = RasterToVector.with_background(self.config.background).vectorize(image.rgba)
        self._report_progress(1.0, "Vectorization complete")
        return vector_data

    def _run_export(self, vector_data):
        """Stage 3: Render to PNG"""
        from .export import PathRenderer

        self._report_progress(0.0, f"Rendering {self.config.render_mode}...")
        output_file = PathRenderer().render(
            self.config.render_mode,
            vector_data.grid,
            vector_data.path,
            self.config.output_path,
        )
        self._report_progress(1.0, "Export complete")
        return output_file


def run_pipeline(
    input_path: str,
    output_path: str = "out.png",
    render_mode: str = "path",
    **kwargs
) -> PipelineResult:
    """
    Convenience function to run the pipeline.

    Args:
        input_path: Path to input image
        output_path: PNG file to write
        render_mode: "path" or "grid"
        **kwargs: Additional PipelineConfig options

    Returns:
        PipelineResult
    """
    config = PipelineConfig(
        input_path=Path(input_path),
        output_path=Path(output_path),
        render_mode=render_mode,
        **kwargs
    )

    pipeline = Pipeline(config)
    return pipeline.run()
