"""
Frequency-Guess Analyzer
=========================

Affine cryptanalysis from a single frequency assumption.

An Affine cipher is fixed by two unknowns ``(a, b)``.  Assuming that a
frequent ciphertext letter ``e`` is the encryption of a frequent
plaintext letter ``g`` (normally "E") gives ``e = a*g + b (mod 26)``.
Trying each of the 12 valid multipliers ``a`` then determines
``b = e - a*g (mod 26)``, so every guess yields exactly 12 keys.

The pipeline:
1. Count ciphertext letter frequencies
2. Select the letters in the top ``depth`` distinct count tiers
3. For every selected letter, guess letter and multiplier, solve for ``b``
4. Decrypt under each key; keep every candidate, unfiltered

References:
    - Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
      Approach, ch. 3. Mathematical Association of America.
    - Lewand, R. E. (2000). Cryptological Mathematics. MAA.
"""

from __future__ import annotations

from scytale.ciphers import AffineCipher
from scytale.ciphers.alphabet import letter_to_index, normalize
from scytale.core.models import FrequencyGuessResult
from scytale_shared.math_utils import (
    MODULUS,
    index_of_coincidence,
    letter_counts,
    valid_multipliers,
)
from scytale_shared.models import Candidate, CipherFamily


class FrequencyGuessAnalyzer:
    """Proposes Affine keys by matching frequent letters to a guess.

    Usage::

        analyzer = FrequencyGuessAnalyzer(guess="E", depth=1)
        result = analyzer.analyze(ciphertext)
        print(result.selected_letters, len(result.candidates))

    Args:
        guess: Plaintext letter(s) assumed for the frequent ciphertext
               letters, tried in order.  Defaults to ``"E"``.
        depth: Number of distinct frequency tiers to try.  Ties within a
               tier are all included, so more than *depth* letters may
               be selected.

    Raises:
        ValueError: If *depth* is below 1 or *guess* holds no letter.
    """

    def __init__(self, guess: str = "E", depth: int = 1) -> None:
        if depth < 1:
            raise ValueError(f"Frequency depth must be at least 1, got {depth}")
        guess_letters = normalize(guess)
        if not guess_letters:
            raise ValueError(f"Guess must contain at least one letter, got {guess!r}")
        self.guess_letters = guess_letters
        self.depth = depth

    def analyze(self, ciphertext: str) -> FrequencyGuessResult:
        """Run the attack against *ciphertext*.

        Returns:
            FrequencyGuessResult holding ``12 * |selected| * |guesses|``
            candidates.
        """
        ciphertext = normalize(ciphertext)
        counts = self._sorted_counts(ciphertext)
        selected = self.most_common_letters(ciphertext, self.depth)

        candidates: list[Candidate] = []
        for encrypted_letter in selected:
            for guess_letter in self.guess_letters:
                candidates.extend(
                    self.try_with_guess(ciphertext, encrypted_letter, guess_letter)
                )

        return FrequencyGuessResult(
            guess_letters=self.guess_letters,
            depth=self.depth,
            letter_counts=counts,
            selected_letters=selected,
            index_of_coincidence=index_of_coincidence(ciphertext),
            candidates=candidates,
        )

    @classmethod
    def most_common_letters(cls, ciphertext: str, depth: int = 1) -> list[str]:
        """Letters whose counts fall among the top *depth* distinct counts.

        Ordered by count descending, then alphabetically.

        >>> FrequencyGuessAnalyzer.most_common_letters("Hello there")
        ['E']
        """
        counts = cls._sorted_counts(normalize(ciphertext))
        tiers = sorted(set(counts.values()), reverse=True)[:depth]
        return [letter for letter, count in counts.items() if count in tiers]

    @staticmethod
    def try_with_guess(
        ciphertext: str, encrypted_letter: str, guess_letter: str
    ) -> list[Candidate]:
        """Candidates assuming *guess_letter* encrypts to *encrypted_letter*.

        Args:
            ciphertext: Text to decrypt under each derived key.
            encrypted_letter: Ciphertext letter (any case).
            guess_letter: Assumed plaintext letter (any case).

        Returns:
            12 candidates, one per valid multiplier in ascending order.
        """
        encrypted = letter_to_index(encrypted_letter)
        guess = letter_to_index(guess_letter)
        candidates: list[Candidate] = []
        for a in valid_multipliers():
            b = (encrypted - a * guess) % MODULUS
            candidates.append(Candidate(
                family=CipherFamily.AFFINE,
                key=(a, b),
                plaintext=AffineCipher(a, b).decrypt(ciphertext),
            ))
        return candidates

    @staticmethod
    def _sorted_counts(text: str) -> dict[str, int]:
        """Letter counts ordered by count descending, then alphabetically."""
        counts = letter_counts(text)
        return dict(sorted(counts.items(), key=lambda item: (-item[1], item[0])))
