"""
Version Gate - Deterministic version parsing, comparison and gating.

All operations are pure: same input always produces same output, and no
files, branches or processes are touched here.
"""

import logging
import re
from itertools import zip_longest
from typing import List, Optional, Tuple

from versiongate.errors import ParseError
from versiongate.models.version import ComparisonOutcome, ComparisonResult, Version
from versiongate.models.gate import GateDecision, GateVerdict

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")
_SUFFIX_BODY = re.compile(r"[0-9A-Za-z.+-]+")
_SUFFIX_START = re.compile(r"[-+]")


class VersionGate:
    """
    Stateless gate deciding whether a candidate version supersedes a reference.

    Ordering rules:
    - Numeric segments compare pairwise, most significant first
    - Missing trailing segments count as 0 ("1.2" == "1.2.0")
    - A pre-release/build suffix is an opaque string, compared
      lexicographically only once every numeric segment is equal
    """

    def parse_version(self, raw: str) -> Version:
        """
        Parse a dot-separated version string.

        Args:
            raw: Version text such as "1.2.0", "01.2" or "1.2.0-rc.1"

        Returns:
            The parsed Version

        Raises:
            ParseError: If the string is empty, has an empty or non-numeric
                segment, or carries a malformed suffix
        """
        text = raw.strip()
        if not text:
            raise ParseError(raw, "empty version string")

        suffix: Optional[str] = None
        match = _SUFFIX_START.search(text)
        if match:
            text, suffix = text[:match.start()], text[match.start():]
            if len(suffix) == 1:
                raise ParseError(raw, f"empty suffix after {suffix!r}")
            if not _SUFFIX_BODY.fullmatch(suffix[1:]):
                raise ParseError(raw, f"malformed suffix {suffix!r}")

        if not text:
            raise ParseError(raw, "no numeric segments")

        segments: List[int] = []
        for position, segment in enumerate(text.split(".")):
            if not segment:
                raise ParseError(raw, f"empty segment at position {position}")
            if not _DIGITS.fullmatch(segment):
                raise ParseError(raw, f"non-numeric segment {segment!r}")
            try:
                segments.append(int(segment))
            except ValueError as e:
                # int() refuses strings past sys.get_int_max_str_digits()
                raise ParseError(raw, f"segment too long ({len(segment)} digits)") from e

        return Version(segments=tuple(segments), suffix=suffix)

    def compare(self, a: Version, b: Version) -> ComparisonResult:
        """
        Compare two versions.

        Args:
            a: The candidate version
            b: The reference version

        Returns:
            ComparisonResult whose outcome is the ordering of ``a`` relative to ``b``
        """
        outcome = ComparisonOutcome.EQUAL
        for left, right in zip_longest(a.segments, b.segments, fillvalue=0):
            if left != right:
                outcome = ComparisonOutcome.GREATER if left > right else ComparisonOutcome.LESS
                break
        else:
            left_suffix, right_suffix = a.suffix or "", b.suffix or ""
            if left_suffix > right_suffix:
                outcome = ComparisonOutcome.GREATER
            elif left_suffix < right_suffix:
                outcome = ComparisonOutcome.LESS

        return ComparisonResult(outcome=outcome, candidate=a, reference=b)

    def decide(self, candidate_raw: str, reference_raw: str) -> GateDecision:
        """
        Decide whether the candidate version may pass the gate.

        Parse failures never escape: they turn into a FAIL decision whose
        explanation names the offending string.

        Args:
            candidate_raw: Version of the branch under test
            reference_raw: Baseline version the candidate must exceed

        Returns:
            GateDecision that passes only when the candidate is strictly greater
        """
        candidate, candidate_error = self._try_parse(candidate_raw)
        reference, reference_error = self._try_parse(reference_raw)

        errors = [str(e) for e in (candidate_error, reference_error) if e is not None]
        if errors:
            detail = "; ".join(errors)
            decision = GateDecision(
                verdict=GateVerdict.FAIL,
                explanation=(
                    f"cannot compare candidate {candidate_raw!r} "
                    f"with reference {reference_raw!r}: {detail}"
                ),
                candidate_raw=candidate_raw,
                reference_raw=reference_raw,
                error=detail,
            )
            logger.debug("Gate failed on unparseable input: %s", detail)
            return decision

        result = self.compare(candidate, reference)
        decision = GateDecision(
            verdict=GateVerdict.PASS if result.is_greater else GateVerdict.FAIL,
            explanation=self._explain(result),
            candidate_raw=candidate_raw,
            reference_raw=reference_raw,
            comparison=result,
        )
        logger.debug("Gate %s: %s", decision.verdict.value, decision.explanation)
        return decision

    def _try_parse(self, raw: str) -> Tuple[Optional[Version], Optional[ParseError]]:
        try:
            return self.parse_version(raw), None
        except ParseError as e:
            return None, e

    def _explain(self, result: ComparisonResult) -> str:
        """Build the explanation text for a comparison."""
        candidate, reference = result.candidate, result.reference
        if result.outcome == ComparisonOutcome.GREATER:
            return f"candidate {candidate} is greater than reference {reference}"
        if result.outcome == ComparisonOutcome.EQUAL:
            return f"candidate {candidate} is not greater than reference {reference} (versions are equal)"
        return f"candidate {candidate} is not greater than reference {reference} (candidate is lower)"


_default_gate = VersionGate()


def parse_version(raw: str) -> Version:
    """Parse a version string with the default gate."""
    return _default_gate.parse_version(raw)


def compare(a: Version, b: Version) -> ComparisonResult:
    """Compare two versions with the default gate."""
    return _default_gate.compare(a, b)


def decide(candidate_raw: str, reference_raw: str) -> GateDecision:
    """Gate a candidate version against a reference with the default gate."""
    return _default_gate.decide(candidate_raw, reference_raw)
