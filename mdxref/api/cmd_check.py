"""Corpus check API command.

CLI: mdxref [root] --entry index.md
"""

from collections.abc import Iterator, Sequence
from pathlib import Path

from ..logging_config import get_logger
from ._constants import EXIT_DANGLING, EXIT_FATAL, EXIT_OK
from .check.check_integrity import check_integrity
from .check.EmptyCorpusError import EmptyCorpusError
from .check.normalize_entry_point import normalize_entry_point
from .config.MdxrefConfig import MdxrefConfig
from .corpus.load_corpus import load_corpus
from .corpus.LoadError import LoadError
from .graph.build_graph import build_graph
from .StageResult import StageResult

logger = get_logger("check")


def _fail(result_obj: StageResult, message: str) -> None:
    result_obj.output = {"errors": [message], "exit_code": EXIT_FATAL}
    result_obj.result = message
    result_obj.success = False
    result_obj.exit_code = EXIT_FATAL


def cmd_check(
    root: str | Path | None = None,
    entry_points: Sequence[str] = (),
    config_path: str | Path | None = None,
    extensions: Sequence[str] | None = None,
    workers: int | None = None,
    config: MdxrefConfig | None = None,
) -> StageResult:
    """Check link integrity of the markdown corpus under ``root``.

    Args:
        root: Corpus root directory (default: current working directory)
        entry_points: Documents exempt from the orphan check, added to the config's
        config_path: Explicit JSON config file
        extensions: Override for the configured document extensions
        workers: Override for the configured loader thread count
        config: Pre-built configuration; skips config file lookup when given
    """
    root_path = Path(root if root is not None else Path.cwd()).expanduser().absolute()

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            run_config = config
            if run_config is None:
                run_config = MdxrefConfig.for_root(
                    root_path, Path(config_path).expanduser() if config_path is not None else None
                )
            run_config = run_config.with_overrides(
                extensions=list(extensions) if extensions else None,
                workers=workers,
                entry_points=[*run_config.entry_points, *entry_points],
            )
        except ValueError as e:
            _fail(result_obj, f"Invalid configuration: {e}")
            return

        yield (0.3, f"Loading documents from {root_path}...")
        try:
            corpus = load_corpus(root_path, run_config)
        except LoadError as e:
            _fail(result_obj, f"Cannot load corpus: {e}")
            return

        yield (0.6, f"Building reference graph for {len(corpus)} documents...")
        graph = build_graph(corpus.documents, run_config)

        yield (0.8, f"Checking {len(graph.links)} links...")
        try:
            report = check_integrity(
                graph,
                corpus.documents,
                entry_points=[normalize_entry_point(e, root_path) for e in run_config.entry_points],
                skipped=corpus.skipped,
                root=str(root_path),
            )
        except EmptyCorpusError:
            exts = ", ".join(run_config.extensions)
            _fail(result_obj, f"No documents ({exts}) found under {root_path}")
            return

        result_obj.output = report.model_dump(mode="python")
        result_obj.success = report.is_valid
        result_obj.exit_code = EXIT_OK if report.is_valid else EXIT_DANGLING
        result_obj.result = (
            f"Checked {report.document_count} documents and {report.link_count} links: "
            f"{report.dangling_count} dangling, {report.orphan_count} orphaned, "
            f"{report.self_reference_count} self-referencing"
        )

    return StageResult(announce=f"Checking links in {root_path}...", progress_callback=do_work)
