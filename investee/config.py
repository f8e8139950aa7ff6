"""Configuration management for investee."""

from dataclasses import dataclass, field

from investee.calculators.dscr import DSCR_PASS_THRESHOLD
from investee.calculators.quote import CLOSING_COST_RATE
from investee.exceptions import ConfigurationError
from investee.models.lending.quote import DEFAULT_DOWN_PAYMENT_PERCENT
from investee.models.lending.underwriting import DEFAULT_HOLDING_MONTHS


@dataclass
class LatencyConfig:
    """Simulated network latency for the mock lending API.

    Delays are in milliseconds per operation. They are only applied when
    ``enabled`` is set, and are multiplied by ``scale``.
    """

    enabled: bool = False
    scale: float = 1.0
    search_ms: int = 600
    dscr_ms: int = 400
    fix_flip_ms: int = 400
    quote_ms: int = 800
    submit_ms: int = 1200

    def delay_seconds(self, operation: str) -> float:
        """Return the delay for ``operation`` in seconds (0 when disabled)."""
        if not self.enabled:
            return 0.0
        try:
            millis = getattr(self, f"{operation}_ms")
        except AttributeError:
            raise ConfigurationError(f"No latency configured for operation {operation!r}") from None
        return max(0.0, millis * self.scale / 1000.0)


@dataclass
class UnderwritingConfig:
    """Business policy applied by the mock lending API.

    The default down payment and holding period fill in requests that
    leave them unset.
    """

    dscr_pass_threshold: float = DSCR_PASS_THRESHOLD
    closing_cost_rate: float = CLOSING_COST_RATE
    default_down_payment_percent: float = DEFAULT_DOWN_PAYMENT_PERCENT
    default_holding_months: float = DEFAULT_HOLDING_MONTHS


@dataclass
class InvesteeConfig:
    """Main configuration for investee."""

    latency: LatencyConfig = field(default_factory=LatencyConfig)
    underwriting: UnderwritingConfig = field(default_factory=UnderwritingConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "InvesteeConfig":
        """Create config from environment variables."""
        import os

        def _float(name: str, default: float) -> float:
            raw = os.getenv(name)
            if raw is None:
                return default
            try:
                return float(raw)
            except ValueError:
                raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None

        latency = LatencyConfig(
            enabled=os.getenv("SIMULATE_LATENCY", "false").lower() == "true",
            scale=_float("LATENCY_SCALE", 1.0),
        )

        underwriting = UnderwritingConfig(
            dscr_pass_threshold=_float("DSCR_PASS_THRESHOLD", DSCR_PASS_THRESHOLD),
            closing_cost_rate=_float("CLOSING_COST_RATE", CLOSING_COST_RATE),
            default_down_payment_percent=_float(
                "DEFAULT_DOWN_PAYMENT_PERCENT", DEFAULT_DOWN_PAYMENT_PERCENT
            ),
            default_holding_months=_float("DEFAULT_HOLDING_MONTHS", DEFAULT_HOLDING_MONTHS),
        )
        if not 0 <= underwriting.default_down_payment_percent <= 100:
            raise ConfigurationError("DEFAULT_DOWN_PAYMENT_PERCENT must be between 0 and 100")

        log_format = os.getenv("LOG_FORMAT", "standard")
        if log_format not in ("standard", "json"):
            raise ConfigurationError(f"LOG_FORMAT must be 'standard' or 'json', got {log_format!r}")

        return cls(
            latency=latency,
            underwriting=underwriting,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )
