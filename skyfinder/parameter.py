"""Parameter settings stored as strings, loaded from ``key = value`` files."""

from __future__ import annotations

import enum
import logging
import math
import re

from .errors import FileAccessError, IndexRangeError, UserInputError

_log = logging.getLogger(__name__)

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_ULONG_MODULUS = 2**64

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")

DEFAULTS: tuple[tuple[str, str], ...] = (
    # Global settings
    ("pipeline.verbose", "false"),
    ("pipeline.pedantic", "true"),
    ("pipeline.threads", "0"),
    ("pipeline.useGPU", "false"),
    ("pipeline.benchmark", "false"),
    # Input
    ("input.data", ""),
    ("input.region", ""),
    ("input.gain", ""),
    ("input.noise", ""),
    ("input.weights", ""),
    ("input.mask", ""),
    ("input.invert", "false"),
    # Flagging
    ("flag.region", ""),
    ("flag.catalog", ""),
    ("flag.radius", "5"),
    ("flag.auto", "false"),
    ("flag.threshold", "5.0"),
    ("flag.log", "false"),
    # Continuum subtraction
    ("contsub.enable", "false"),
    ("contsub.order", "0"),
    ("contsub.threshold", "2.0"),
    ("contsub.shift", "4"),
    ("contsub.padding", "3"),
    # Noise scaling
    ("scaleNoise.enable", "false"),
    ("scaleNoise.mode", "spectral"),
    ("scaleNoise.statistic", "mad"),
    ("scaleNoise.fluxRange", "negative"),
    ("scaleNoise.windowXY", "25"),
    ("scaleNoise.windowZ", "15"),
    ("scaleNoise.gridXY", "0"),
    ("scaleNoise.gridZ", "0"),
    ("scaleNoise.interpolate", "false"),
    ("scaleNoise.scfind", "false"),
    # Ripple filter
    ("rippleFilter.enable", "false"),
    ("rippleFilter.statistic", "median"),
    ("rippleFilter.windowXY", "31"),
    ("rippleFilter.windowZ", "15"),
    ("rippleFilter.gridXY", "0"),
    ("rippleFilter.gridZ", "0"),
    ("rippleFilter.interpolate", "false"),
    # S+C finder
    ("scfind.enable", "true"),
    ("scfind.kernelsXY", "0, 3, 6"),
    ("scfind.kernelsZ", "0, 3, 7, 15"),
    ("scfind.threshold", "5.0"),
    ("scfind.replacement", "2.0"),
    ("scfind.statistic", "mad"),
    ("scfind.fluxRange", "negative"),
    # Threshold finder
    ("threshold.enable", "false"),
    ("threshold.threshold", "5.0"),
    ("threshold.mode", "relative"),
    ("threshold.statistic", "mad"),
    ("threshold.fluxRange", "negative"),
    # Linker
    ("linker.enable", "true"),
    ("linker.radiusXY", "1"),
    ("linker.radiusZ", "1"),
    ("linker.minSizeXY", "5"),
    ("linker.minSizeZ", "5"),
    ("linker.maxSizeXY", "0"),
    ("linker.maxSizeZ", "0"),
    ("linker.minPixels", "0"),
    ("linker.maxPixels", "0"),
    ("linker.minFill", "0.0"),
    ("linker.maxFill", "0.0"),
    ("linker.positivity", "false"),
    ("linker.keepNegative", "false"),
    # Reliability
    ("reliability.enable", "false"),
    ("reliability.parameters", "peak, sum, mean"),
    ("reliability.threshold", "0.9"),
    ("reliability.scaleKernel", "0.4"),
    ("reliability.minSNR", "3.0"),
    ("reliability.minPixels", "0"),
    ("reliability.autoKernel", "false"),
    ("reliability.iterations", "30"),
    ("reliability.tolerance", "0.05"),
    ("reliability.catalog", ""),
    ("reliability.plot", "true"),
    ("reliability.debug", "false"),
    # Mask dilation
    ("dilation.enable", "false"),
    ("dilation.iterationsXY", "10"),
    ("dilation.iterationsZ", "5"),
    ("dilation.threshold", "0.001"),
    # Parameterisation
    ("parameter.enable", "true"),
    ("parameter.wcs", "true"),
    ("parameter.physical", "false"),
    ("parameter.prefix", "SoFiA"),
    ("parameter.offset", "false"),
    # Output
    ("output.directory", ""),
    ("output.filename", ""),
    ("output.writeCatASCII", "true"),
    ("output.writeCatXML", "true"),
    ("output.writeCatSQL", "false"),
    ("output.writeNoise", "false"),
    ("output.writeFiltered", "false"),
    ("output.writeMask", "false"),
    ("output.writeMask2d", "false"),
    ("output.writeRawMask", "false"),
    ("output.writeMoments", "false"),
    ("output.writeCubelets", "false"),
    ("output.writePV", "false"),
    ("output.writeKarma", "false"),
    ("output.marginCubelets", "10"),
    ("output.thresholdMom12", "0.0"),
    ("output.overwrite", "true"),
)


def _parse_float(text: str) -> float:
    """Parse the leading number of ``text``; 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(0)) if match else 0.0


def _parse_int(text: str) -> int:
    """Parse the leading decimal integer of ``text``, clamped to a signed 64-bit range."""
    match = _INT_PREFIX.match(text)
    if not match:
        return 0
    return max(_LONG_MIN, min(_LONG_MAX, int(match.group(0))))


def _is_setting_line(text: str) -> bool:
    return bool(text) and text[0].isascii() and text[0].isalnum()


def _split_setting(line: str) -> tuple[str, str | None]:
    """Split a trimmed ``key = value # comment`` line into key and value."""
    key_part, separator, rest = line.partition("=")
    key = key_part.strip()
    if not separator:
        return key, None
    rest = rest.lstrip("#")
    if not rest:
        return key, None
    return key, rest.split("#", 1)[0].strip()


class LoadMode(enum.Enum):
    """How settings read from a file are merged into a parameter set."""

    APPEND = "append"
    UPDATE = "update"


class ParameterSet:
    """Ordered collection of named parameter settings held as strings."""

    __slots__ = ("_params", "verbose")

    def __init__(self, verbose: bool = False) -> None:
        self._params: dict[str, str] = {}
        self.verbose = verbose

    @staticmethod
    def _check_key(key: str) -> None:
        if not key:
            raise UserInputError("Empty parameter keyword provided.")

    def set(self, key: str, value: str) -> None:
        """Set a parameter, replacing an existing value or appending a new one."""
        self._check_key(key)
        if key in self._params and self.verbose:
            _log.warning(
                "Parameter '%s' already exists. Replacing existing definition.", key
            )
        self._params[key] = value

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        self._check_key(key)
        return key in self._params

    def __len__(self) -> int:
        return len(self._params)

    def _raw(self, key: str) -> str | None:
        self._check_key(key)
        return self._params.get(key)

    def get_float(self, key: str) -> float:
        """Return the value as a float, or NaN if the parameter does not exist."""
        raw = self._raw(key)
        return math.nan if raw is None else _parse_float(raw)

    def get_int(self, key: str) -> int:
        """Return the value as an integer, or 0 if the parameter does not exist."""
        raw = self._raw(key)
        return 0 if raw is None else _parse_int(raw)

    def get_uint(self, key: str) -> int:
        """Return the value as an unsigned 64-bit integer, or 0 if it does not exist."""
        raw = self._raw(key)
        return 0 if raw is None else _parse_int(raw) % _ULONG_MODULUS

    def get_bool(self, key: str) -> bool:
        """Return True only if the value is exactly 'true'."""
        return self._raw(key) == "true"

    def get_str(self, key: str) -> str | None:
        """Return the raw value, or None if the parameter does not exist."""
        return self._raw(key)

    def _item_at(self, index: int) -> tuple[str, str]:
        if not 0 <= index < len(self._params):
            raise IndexRangeError("Parameter list index out of range.")
        return list(self._params.items())[index]

    def key_at(self, index: int) -> str:
        """Return the name of the parameter at position ``index``."""
        return self._item_at(index)[0]

    def value_at(self, index: int) -> str:
        """Return the value of the parameter at position ``index``."""
        return self._item_at(index)[1]

    def load(self, filename: str, mode: LoadMode = LoadMode.APPEND) -> None:
        """Read ``key = value # comment`` settings from a file.

        In APPEND mode every setting is stored. In UPDATE mode only existing
        parameters are changed; unknown ones are reported and, if
        'pipeline.pedantic' is true, cause a UserInputError at the end.
        """
        if not filename:
            raise UserInputError("Empty file name provided.")
        if not isinstance(mode, LoadMode):
            raise UserInputError("Mode must be 'LoadMode.APPEND' or 'LoadMode.UPDATE'.")
        try:
            with open(filename, "r") as handle:
                lines = [line.strip() for line in handle]
        except OSError as exc:
            raise FileAccessError(f"Failed to open input file: {filename}.") from exc

        unknown_parameter = False
        for line in lines:
            if not _is_setting_line(line):
                continue
            key, value = _split_setting(line)
            if not key:
                if self.verbose:
                    _log.warning("Failed to parse the following setting: %s", line)
                continue

            if mode is LoadMode.UPDATE and key not in self._params:
                _log.info("  Unknown parameter: '%s'", key)
                unknown_parameter = True
                continue

            if not value:
                if self.verbose:
                    _log.warning("Parameter '%s' has no value.", key)
                self.set(key, "")
            else:
                self.set(key, value)

            if key == "pipeline.verbose":
                self.verbose = self.get_bool("pipeline.verbose")

        if unknown_parameter and self.get_bool("pipeline.pedantic"):
            raise UserInputError(
                "Unknown parameter settings encountered. Please check your input "
                "or change 'pipeline.pedantic' to 'false'."
            )

    def set_defaults(self) -> None:
        """Create or reset every default parameter setting."""
        for key, value in DEFAULTS:
            self.set(key, value)

    def __repr__(self) -> str:
        return f"ParameterSet({len(self._params)} parameters)"