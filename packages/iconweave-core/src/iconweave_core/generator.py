"""Icon generation pipeline.

Scanner -> feature gate -> extractor -> synthesizer -> formatting ->
output writer. One pipeline serves both failure policies:

- best-effort: the external formatter is probed up front; assets are
  processed on a thread pool and failures drop the asset.
- strict: assets are processed one at a time and the first failure
  aborts the run with a GenerationError naming the file.

Either way the output is written sequentially in scan order, so the
same inputs always produce the same file.

Example:
    >>> config = GeneratorConfig.from_env(icons_dir=Path("lucide/icons"))
    >>> report = IconGenerator(config).run()
    >>> print(report.generated_count)
"""

from __future__ import annotations

import time
from collections.abc import Iterable, Iterator, Mapping
from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime

import structlog

from iconweave_core.aggregator import OutputWriter
from iconweave_core.config import GeneratorConfig
from iconweave_core.errors import (
    AssetReadError,
    FormatterNotFoundError,
    GenerationError,
    IconweaveError,
)
from iconweave_core.extractor import extract_markup
from iconweave_core.features import FeatureSet, feature_name
from iconweave_core.formatting import FormattingPipeline, ProcessFormatter
from iconweave_core.models import AssetOutcome, AssetStatus, GenerationReport, IconAsset
from iconweave_core.observability import span
from iconweave_core.preflight import run_preflight
from iconweave_core.scanner import scan_assets
from iconweave_core.synthesizer import synthesize

logger = structlog.get_logger(__name__)

# Outcome of one asset plus its formatted source when generated
_Processed = tuple[AssetOutcome, str | None]


class IconGenerator:
    """Run the generation pipeline for one configuration.

    Attributes:
        config: Generator configuration.
        features: Feature snapshot, or None when gating is off.
        pipeline: Formatting pipeline applied to every definition.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            config: Generator configuration.
            environ: Environment used to resolve feature flags
                (defaults to os.environ).
        """
        self.config = config
        self.features: FeatureSet | None = None
        if config.feature_gating:
            self.features = FeatureSet.from_environ(
                environ,
                prefix=config.feature_prefix,
                all_feature=config.all_feature,
            )
        formatter = None
        if config.formatter_command:
            formatter = ProcessFormatter(config.formatter_command)
        self.pipeline = FormattingPipeline(formatter=formatter)
        self._log = logger.bind(policy=config.policy.value)

    def run(self) -> GenerationReport:
        """Generate the output file.

        Returns:
            GenerationReport with per-asset outcomes in scan order.

        Raises:
            FormatterNotFoundError: Best-effort runs, when the external
                formatter cannot be executed.
            GenerationError: Strict runs, on the first failing asset.
            AssetError: Strict runs, for files without an extension.
            ConfigurationError: If the icon root or output directory is missing.
        """
        start_time = time.monotonic()
        started_at = datetime.now(UTC)
        outcomes: list[AssetOutcome] = []

        attrs = {
            "icons_dir": str(self.config.icons_dir),
            "output": str(self.config.output_path),
            "policy": self.config.policy.value,
        }
        with span("generate", attributes=attrs):
            if not self.config.strict:
                self._check_formatter()

            with OutputWriter(self.config.output_path, self.config.prelude) as writer:
                if self.features is not None and not self.features.any_enabled:
                    self._log.info("no_features_enabled", prefix=self.config.feature_prefix)
                else:
                    for outcome, source in self._process_all():
                        outcomes.append(outcome)
                        if source is not None:
                            writer.write_component(source)

        report = GenerationReport(
            output_path=self.config.output_path,
            outcomes=outcomes,
            started_at=started_at,
            duration_ms=int((time.monotonic() - start_time) * 1000),
        )
        self._log.info(
            "generation_completed",
            output=str(report.output_path),
            generated=report.generated_count,
            dropped=report.dropped_count,
            skipped=report.skipped_count,
            duration_ms=report.duration_ms,
        )
        return report

    def _check_formatter(self) -> None:
        """Fail before any work when the external formatter is unavailable."""
        result = run_preflight(self.config.formatter_command)
        failure = result.first_failure()
        if failure is not None:
            raise FormatterNotFoundError(
                failure.message,
                command=list(self.config.formatter_command or ()),
                internal_details=str(failure.details),
            )

    def _process_all(self) -> Iterator[_Processed]:
        assets = scan_assets(
            self.config.icons_dir,
            self.config.extension,
            strict=self.config.strict,
        )
        if self.config.strict:
            # Lazy and sequential: nothing after a failure is processed
            for asset in assets:
                yield self._process(asset)
        else:
            yield from self._process_parallel(assets)

    def _process_parallel(self, assets: Iterable[IconAsset]) -> list[_Processed]:
        """Process assets on the worker pool, keeping scan order."""
        with ThreadPoolExecutor(max_workers=self.config.workers) as pool:
            return list(pool.map(self._process, assets))

    def _process(self, asset: IconAsset) -> _Processed:
        """Take one asset from discovery to formatted source.

        Raises:
            GenerationError: In strict runs, wrapping any per-asset failure.
        """
        if self.features is not None and not self.features.is_enabled(asset.stem):
            return (
                AssetOutcome(
                    path=asset.path,
                    identifier=asset.identifier,
                    status=AssetStatus.SKIPPED,
                    reason=f"feature '{feature_name(asset.stem)}' not enabled",
                ),
                None,
            )

        try:
            with span("asset", attributes={"path": str(asset.path)}, log_end=False):
                source = self._generate(asset)
        except IconweaveError as e:
            if self.config.strict:
                raise GenerationError(asset.path, e) from e
            self._log.info("asset_dropped", path=str(asset.path), reason=e.user_message)
            return (
                AssetOutcome(
                    path=asset.path,
                    identifier=asset.identifier or None,
                    status=AssetStatus.DROPPED,
                    reason=e.user_message,
                ),
                None,
            )

        outcome = AssetOutcome(
            path=asset.path,
            identifier=asset.identifier,
            status=AssetStatus.GENERATED,
        )
        return outcome, source

    def _generate(self, asset: IconAsset) -> str:
        try:
            text = asset.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise AssetReadError(
                "Cannot read asset",
                asset_path=asset.path,
                internal_details=str(e),
            ) from e

        markup = extract_markup(text, source=asset.path)
        definition = synthesize(asset.identifier, markup)
        return self.pipeline.format(definition)


def generate(
    config: GeneratorConfig,
    environ: Mapping[str, str] | None = None,
) -> GenerationReport:
    """Run the generation pipeline.

    Convenience function that creates an IconGenerator and runs it.

    Args:
        config: Generator configuration.
        environ: Environment used for feature flags (defaults to os.environ).

    Returns:
        GenerationReport for the run.
    """
    return IconGenerator(config, environ).run()
