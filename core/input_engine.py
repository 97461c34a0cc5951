"""Letter-slot state machine for the word currently being typed."""

import logging

from .config import CORRECT_WORD_XP, NO_MISTAKES_BONUS, NO_HELP_BONUS, ERROR_CLEAR_DELAY_MS
from .models import CharMatch, LetterSlotStatus
from .utils import compare_chars, is_letter

logger = logging.getLogger(__name__)

_ERROR_STATUS = {
    CharMatch.FADA_MISSING: LetterSlotStatus.FADA_MISSING,
    CharMatch.INCORRECT: LetterSlotStatus.INCORRECT,
}


class InputEngine:
    """Typing, backspace and reveal for the current word.

    Expects self.feedback (Feedback), self.scheduler (Scheduler) and the
    lesson controller's word list on the same object.
    """

    def _clear_word_state(self) -> None:
        for handle in self._pending_reverts.values():
            handle.cancel()
        self._pending_reverts = {}
        # invalidates any revert already on its way
        self._word_generation += 1
        self.typed_letters = []
        self.slot_states = []
        self.is_current_word_letter = []
        self.current_letter_index = 0
        self.current_word_has_mistakes = False
        self.current_word_help_used = False
        self.revealed_letter_count = 0

    def initialize_current_word(self) -> None:
        """Fresh slots for the word at current_word_index, first letter focused."""
        self._clear_word_state()
        token = self._current_token()
        if token is None or token.is_punctuation:
            return

        word = token.text
        self.is_current_word_letter = [is_letter(c) for c in word]
        self.typed_letters = [None] * len(word)
        self.slot_states = [
            LetterSlotStatus.EMPTY if letter else LetterSlotStatus.DISABLED
            for letter in self.is_current_word_letter
        ]
        first = self._slot_for_cursor(0)
        if first is not None:
            self.slot_states[first] = LetterSlotStatus.FOCUSED

    def _current_token(self):
        if 0 <= self.current_word_index < len(self.all_words):
            return self.all_words[self.current_word_index]
        return None

    def _slot_for_cursor(self, cursor: int) -> int | None:
        """Index into the word of the cursor-th typeable letter."""
        count = 0
        for i, letter in enumerate(self.is_current_word_letter):
            if letter:
                if count == cursor:
                    return i
                count += 1
        return None

    def _typeable_count(self) -> int:
        return sum(1 for letter in self.is_current_word_letter if letter)

    def _word_is_open(self) -> bool:
        """True while the current word has slots and is not yet revealed."""
        return bool(self.is_current_word_letter) and not self.revealed_words[self.current_word_index]

    def _notify(self, cue) -> None:
        try:
            cue()
        except Exception as e:
            logger.warning(f"Feedback {getattr(cue, '__name__', cue)} failed: {e}")

    # Keystrokes

    def type_letter(self, letter: str) -> None:
        if not letter or not self._word_is_open():
            return
        slot = self._slot_for_cursor(self.current_letter_index)
        if slot is None or self.slot_states[slot] == LetterSlotStatus.CORRECT:
            return

        target = self.all_words[self.current_word_index].text[slot]
        result = compare_chars(letter, target)
        self.typed_letters[slot] = letter

        if result is CharMatch.CORRECT:
            self._accept_letter(slot, announce=True)
            return

        self._notify(self.feedback.letter_incorrect)
        self.slot_states[slot] = _ERROR_STATUS[result]
        self.record_mistake()
        self.current_word_has_mistakes = True
        self._schedule_revert(slot, letter)

    def reveal_letter(self) -> None:
        """Fill the focused slot with its target letter, at a scoring cost."""
        if not self._word_is_open():
            return
        slot = self._slot_for_cursor(self.current_letter_index)
        if slot is None:
            return

        self.typed_letters[slot] = self.all_words[self.current_word_index].text[slot]
        self.current_word_help_used = True
        self.revealed_letter_count += 1
        self._accept_letter(slot, announce=False)

    def backspace(self) -> None:
        if not self._word_is_open() or self.current_letter_index <= 0:
            return
        previous = self._slot_for_cursor(self.current_letter_index - 1)
        if previous is None:
            return

        current = self._slot_for_cursor(self.current_letter_index)
        if current is not None:
            self._cancel_revert(current)
            self.typed_letters[current] = None
            self.slot_states[current] = LetterSlotStatus.EMPTY

        self.typed_letters[previous] = None
        self.slot_states[previous] = LetterSlotStatus.FOCUSED
        self.current_letter_index -= 1

    def _accept_letter(self, slot: int, announce: bool) -> None:
        self._cancel_revert(slot)
        self.slot_states[slot] = LetterSlotStatus.CORRECT
        self.current_letter_index += 1

        next_slot = self._slot_for_cursor(self.current_letter_index)
        if next_slot is not None:
            self.slot_states[next_slot] = LetterSlotStatus.FOCUSED
            if announce:
                self._notify(self.feedback.letter_correct)
            return

        self._notify(self.feedback.word_complete)
        self.add_session_xp(self._word_xp())
        self.complete_current_word()

    def _word_xp(self) -> int:
        if self.revealed_letter_count >= self._typeable_count():
            return 0
        xp = CORRECT_WORD_XP
        if not self.current_word_has_mistakes:
            xp += NO_MISTAKES_BONUS
        if not self.current_word_help_used:
            xp += NO_HELP_BONUS
        return xp

    # Deferred clearing of wrong letters

    def _schedule_revert(self, slot: int, letter: str) -> None:
        self._cancel_revert(slot)
        generation = self._word_generation

        def revert():
            self._revert_slot(generation, slot, letter)

        self._pending_reverts[slot] = self.scheduler.call_later(ERROR_CLEAR_DELAY_MS, revert)

    def _cancel_revert(self, slot: int) -> None:
        handle = self._pending_reverts.pop(slot, None)
        if handle is not None:
            handle.cancel()

    def _revert_slot(self, generation: int, slot: int, letter: str) -> None:
        if generation != self._word_generation:
            return
        self._pending_reverts.pop(slot, None)
        if slot >= len(self.typed_letters) or self.typed_letters[slot] != letter:
            return
        if self.slot_states[slot] not in (LetterSlotStatus.INCORRECT, LetterSlotStatus.FADA_MISSING):
            return
        self.typed_letters[slot] = None
        self.slot_states[slot] = LetterSlotStatus.FOCUSED

    # Queries

    def get_current_word(self) -> str:
        token = self._current_token()
        return token.text if token else ''

    def is_word_complete(self) -> bool:
        if not self.is_current_word_letter:
            return False
        return all(
            state == LetterSlotStatus.CORRECT
            for state, letter in zip(self.slot_states, self.is_current_word_letter)
            if letter
        )
