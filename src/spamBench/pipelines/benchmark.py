#!/usr/bin/env python3
"""
Benchmark pipeline for spamBench.

load -> stratified split -> fit transform on train -> train/evaluate every
registered model -> write reports.
"""

import argparse
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from spamBench.core.base import ExperimentConfig
from spamBench.core.evaluation_harness import EvaluationHarness
from spamBench.core.results import BenchmarkResult
from spamBench.data.dataset import LoadSummary, Split
from spamBench.data.loader import DataLoader
from spamBench.data.partitioner import StratifiedPartitioner
from spamBench.evaluation.reporter import ResultsReporter
from spamBench.evaluation.visualizer import ResultsVisualizer
from spamBench.preprocessing.standardizer import FeatureStandardizer, FeatureTransform
from spamBench.utils.config import ConfigManager
from spamBench.utils.helpers import ensure_directory, format_time, save_object
from spamBench.utils.logger import get_logger, setup_logging


@dataclass
class BenchmarkRun:
    """Artifacts of one pipeline run."""
    config: ExperimentConfig
    load_summary: LoadSummary
    split: Split
    transform: FeatureTransform
    result: BenchmarkResult
    written: Dict[str, Path]


def run_benchmark(config: ExperimentConfig, write_outputs: bool = True) -> BenchmarkRun:
    """
    Run the whole benchmark for an explicit configuration.

    Loader and partitioner errors propagate and abort the run; individual
    model failures are recorded in the result.
    """
    logger = get_logger("BenchmarkPipeline")
    if not config.data_path:
        raise ValueError("data_path is required")
    if not config.models:
        raise ValueError("The model registry is empty")

    logger.info("=" * 60)
    logger.info("Loading data")
    logger.info("=" * 60)
    dataset, load_summary = DataLoader().load_data(config.data_path)

    split = StratifiedPartitioner(config.split_fraction, config.random_seed).split(dataset)

    standardizer = FeatureStandardizer().fit(split.train.features)
    transform = standardizer.transform_

    logger.info("=" * 60)
    logger.info("Training and evaluating models")
    logger.info("=" * 60)
    harness = EvaluationHarness(config.models, config.cv_config())
    result = harness.run(split.train, split.holdout, transform)

    reporter = ResultsReporter()
    logger.info("Holdout report:\n" + reporter.format_report(result))
    for name, failure in result.failures.items():
        logger.warning(f"Model '{name}' failed to train: {failure.reason}")

    written: Dict[str, Path] = {}
    if write_outputs:
        output_dir = ensure_directory(config.output_dir)
        written = reporter.save_results(result, output_dir)
        written['split'] = output_dir / "split_indices.json"
        reporter.save_results_json({
            'split_fraction': split.split_fraction,
            'random_seed': split.random_seed,
            'train_row_ids': split.train.row_ids,
            'holdout_row_ids': split.holdout.row_ids,
        }, written['split'])
        written['transform'] = output_dir / "feature_transform.json"
        reporter.save_results_json(transform.to_dict(), written['transform'])

        if config.generate_plots:
            visualizer = ResultsVisualizer()
            roc_path = visualizer.plot_roc_curves(result, output_dir / "plots" / "roc_curves.png")
            if roc_path is not None:
                written['roc_plot'] = roc_path
            box_path = visualizer.plot_resample_distributions(result, output_dir / "plots" / "resamples.png")
            if box_path is not None:
                written['resample_plot'] = box_path

        if config.save_models:
            for name, model in result.fitted_models.items():
                path = output_dir / "models" / f"{name}.joblib"
                save_object({'model': model, 'transform': transform}, path)
                written[f'model_{name}'] = path

    return BenchmarkRun(
        config=config,
        load_summary=load_summary,
        split=split,
        transform=transform,
        result=result,
        written=written,
    )


def _create_experiment_config(args: argparse.Namespace) -> ConfigManager:
    """Defaults, then the YAML/JSON file, then command-line overrides."""
    manager = ConfigManager()
    config_file = getattr(args, 'config', None)
    if config_file:
        manager.load_from_file(config_file)
    manager.update_config(
        data_path=getattr(args, 'data', None),
        output_dir=getattr(args, 'output', None),
        split_fraction=getattr(args, 'split_fraction', None),
        random_seed=getattr(args, 'seed', None),
        cv_folds=getattr(args, 'cv_folds', None),
        n_repeats=getattr(args, 'cv_repeats', None),
        n_jobs=getattr(args, 'cpu', None),
        generate_plots=getattr(args, 'plots', None),
        save_models=getattr(args, 'save_models', None),
    )
    models = getattr(args, 'models', None)
    if models:
        manager.select_models(models)
    return manager


def handle_run(args: argparse.Namespace) -> Optional[BenchmarkRun]:
    """Handle the run command: build the config, set up logging, run the pipeline."""
    manager = _create_experiment_config(args)
    config = manager.get_config()

    output_dir = ensure_directory(config.output_dir)
    setup_logging(log_file=output_dir / "run.log")
    logger = get_logger("BenchmarkPipeline")
    logger.info(f"Output directory: {output_dir}")
    manager.save_to_file(output_dir / "config.yaml")

    start = time.time()
    run = run_benchmark(config)
    logger.info(f"Benchmark finished in {format_time(time.time() - start)}")
    return run
