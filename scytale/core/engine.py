"""
Scytale Engine
===============

Central orchestrator for the Scytale workbench.  The ScytaleEngine class
builds cipher engines and runs the cryptanalysis analyzers, logging and
timing every operation and wrapping its outcome in an
:class:`~scytale_shared.models.AnalysisResult`.

Architecture follows the Facade pattern (Gamma et al., 1994), providing
one simplified interface over the cipher and analyzer subsystems.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
"""

from __future__ import annotations

from typing import Optional, Sequence

from scytale.analyzers import BruteForceAnalyzer, CribDragAnalyzer, FrequencyGuessAnalyzer
from scytale.ciphers import ClassicalCipher, create_cipher
from scytale.ciphers.alphabet import normalize
from scytale.core.errors import ScytaleError
from scytale_shared.config import ScytaleConfig
from scytale_shared.logger import ScytaleLogger
from scytale_shared.models import AnalysisResult, CipherFamily


class ScytaleEngine:
    """Orchestrates all Scytale cipher and cryptanalysis operations.

    Usage::

        engine = ScytaleEngine()
        result = engine.encrypt("affine", [239, 152], "drink water")
        result = engine.brute_force("caesar", "QUPCV OZGTM BAOMB IXQHH I")
        result = engine.frequency_guess(ciphertext, guess="E", depth=2)
        result = engine.crib_drag(ciphertext, "STEVE")

    Key and length errors are logged and re-raised unchanged.

    Attributes:
        config: Scytale configuration instance.
        logger: Logger for the engine.
    """

    def __init__(self, config: Optional[ScytaleConfig] = None) -> None:
        self.config = config or ScytaleConfig()
        settings = self.config.global_settings
        self.logger = ScytaleLogger(
            "engine",
            log_level=settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
        )
        self._crib_drag_analyzer = CribDragAnalyzer()

    # ------------------------------------------------------------------ #
    #  Cipher operations
    # ------------------------------------------------------------------ #

    def build_cipher(
        self, family: CipherFamily | str, key: Sequence[int]
    ) -> ClassicalCipher:
        """Construct a cipher engine, logging rejected keys."""
        try:
            return create_cipher(family, key)
        except (ScytaleError, ValueError) as exc:
            self.logger.warning("Rejected key %s for %s: %s", list(key), family, exc)
            raise

    def encrypt(
        self, family: CipherFamily | str, key: Sequence[int], message: str
    ) -> AnalysisResult:
        """Encrypt *message* under *key*; output is in 5-letter blocks."""
        with self.logger.operation("encrypt"):
            cipher = self.build_cipher(family, key)
            result = self._new_result("encrypt", cipher.family, message)
            result.output = cipher.encrypt(message)
            result.metadata = self._cipher_metadata(cipher)
            self.logger.debug("Encrypted %d letters", len(normalize(message)))
            return result.finalize(
                f"{cipher.family.label} encryption with key {list(cipher.key)}"
            )

    def decrypt(
        self, family: CipherFamily | str, key: Sequence[int], ciphertext: str
    ) -> AnalysisResult:
        """Decrypt *ciphertext* under *key*; output is contiguous."""
        with self.logger.operation("decrypt"):
            cipher = self.build_cipher(family, key)
            result = self._new_result("decrypt", cipher.family, ciphertext)
            try:
                result.output = cipher.decrypt(ciphertext)
            except ScytaleError as exc:
                self.logger.warning("Decryption rejected: %s", exc)
                raise
            result.metadata = self._cipher_metadata(cipher)
            return result.finalize(
                f"{cipher.family.label} decryption with key {list(cipher.key)}"
            )

    # ------------------------------------------------------------------ #
    #  Cryptanalysis
    # ------------------------------------------------------------------ #

    def brute_force(self, family: CipherFamily | str, ciphertext: str) -> AnalysisResult:
        """Try every key of an Additive or Multiplicative cipher."""
        if isinstance(family, str):
            family = CipherFamily.parse(family)
        with self.logger.operation("brute_force"):
            result = self._new_result("brute_force", family, ciphertext)
            analyzer = BruteForceAnalyzer(family)
            with self.logger.timed(f"{family.label} brute force"):
                outcome = analyzer.analyze(ciphertext)
            result.candidates = outcome.candidates
            result.metadata = outcome.model_dump(exclude={"candidates"}, mode="json")
            return result.finalize(
                f"{family.label} brute force: {outcome.key_space} keys tried"
            )

    def frequency_guess(
        self,
        ciphertext: str,
        guess: Optional[str] = None,
        depth: Optional[int] = None,
    ) -> AnalysisResult:
        """Propose Affine keys from letter-frequency guesses.

        *guess* and *depth* default to the ``[cryptanalysis]`` config.
        """
        settings = self.config.cryptanalysis
        guess = guess if guess is not None else settings.guess_letters
        depth = depth if depth is not None else settings.frequency_depth

        with self.logger.operation("frequency_guess"):
            result = self._new_result("frequency_guess", CipherFamily.AFFINE, ciphertext)
            analyzer = FrequencyGuessAnalyzer(guess=guess, depth=depth)
            with self.logger.timed("affine frequency guess"):
                outcome = analyzer.analyze(ciphertext)
            self.logger.info(
                "Selected letters %s for guess %s",
                ", ".join(outcome.selected_letters) or "-",
                outcome.guess_letters,
            )
            result.candidates = outcome.candidates
            result.metadata = outcome.model_dump(exclude={"candidates"}, mode="json")
            return result.finalize(
                f"Affine frequency guess: {len(outcome.selected_letters)} letter(s) "
                f"x {len(outcome.guess_letters)} guess(es) -> "
                f"{len(outcome.candidates)} candidates"
            )

    def crib_drag(self, ciphertext: str, crib: str) -> AnalysisResult:
        """Recover Hill digraph keys consistent with *crib*."""
        with self.logger.operation("crib_drag"):
            result = self._new_result("crib_drag", CipherFamily.HILL_DIGRAPH, ciphertext)
            letters = normalize(ciphertext)
            if len(letters) % 2 != 0:
                self.logger.warning(
                    "Ciphertext has odd length %d; no Hill digraph key can apply",
                    len(letters),
                )
            elif len(normalize(crib)) > len(letters):
                self.logger.warning("Crib is longer than the ciphertext")

            with self.logger.timed(f"crib drag of {normalize(crib)!r}"):
                outcome = self._crib_drag_analyzer.analyze(ciphertext, crib)
            result.candidates = outcome.candidates
            result.metadata = outcome.model_dump(exclude={"candidates"}, mode="json")
            return result.finalize(
                f"Hill crib drag: {outcome.offsets_checked} offsets checked, "
                f"{len(outcome.candidates)} candidates"
            )

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _new_result(operation: str, family: CipherFamily, text: str) -> AnalysisResult:
        return AnalysisResult(operation=operation, family=family, target=text)

    @staticmethod
    def _cipher_metadata(cipher: ClassicalCipher) -> dict:
        return {
            "key": list(cipher.key),
            "decryption_key": list(cipher.decryption_key),
        }
