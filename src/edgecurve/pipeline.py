"""
Main pipeline orchestrator for edgecurve.

Runs edge extraction, segmentation, path selection and per-path
simplification + fitting. Every call is independent: no state is kept
between runs, so concurrent calls on different buffers are safe.
"""

from edgecurve.config import load_config, validate_config
from edgecurve.fitting.polynomial import fit_polynomial
from edgecurve.io.load_image import load_image
from edgecurve.paths.segment import segment_edges, select_top_paths
from edgecurve.paths.simplify import simplify_path
from edgecurve.tracer import get_tracer, trace
from edgecurve.vision.edges import extract_edges


@trace(label="run_pipeline")
def run_pipeline(buffer, config=None):
    """
    Fit polynomial curves to the dominant edge paths of an image.

    Args:
        buffer: PixelBuffer (read-only)
        config: PipelineConfig (defaults if omitted)

    Returns:
        list of FittingResult, longest source path first, at most
        config.segment.max_paths long. Empty if no path survives.

    Raises ValueError if config has out-of-range parameters.
    """
    tracer = get_tracer()

    if config is None:
        config = load_config()

    errors = validate_config(config)
    if errors:
        for error in errors:
            tracer.event(error, level="ERROR")
        raise ValueError(f"Invalid configuration: {errors}")

    with tracer.span("extract", module="pipeline"):
        edges = extract_edges(buffer, config.edges.threshold)

    with tracer.span("segment", module="pipeline"):
        paths = segment_edges(edges, config.segment.max_gap, config.segment.min_path_length)
        top_paths = select_top_paths(paths, config.segment.max_paths)

    results = []
    with tracer.span("fit", module="pipeline"):
        for path in top_paths:
            simplified = simplify_path(path, config.simplify.epsilon)
            result = fit_polynomial(
                simplified,
                config.fit.degree,
                buffer.width,
                buffer.height,
                sample_step=config.fit.sample_step,
                source_length=len(path),
            )
            tracer.event(
                f"Path {len(path)} -> {len(simplified)} points: {result.formula}",
                status=result.status.value,
            )
            results.append(result)

    tracer.event(f"Pipeline complete: {len(edges)} edges, {len(paths)} paths, {len(results)} fits")

    return results


def analyze_image(path, config=None, config_path=None):
    """Load an image file and run the pipeline on it."""
    if config is None:
        config = load_config(config_path)

    buffer = load_image(path)
    return run_pipeline(buffer, config)
