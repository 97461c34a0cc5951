"""Word-level navigation inside the current unit."""


class NavigationHelper:
    """Moves the current word pointer without sequential completion.

    Punctuation and already revealed words are never landed on. Leaving a word
    discards its partial typing.
    """

    def _is_navigable(self, index: int) -> bool:
        return not self.all_words[index].is_punctuation and not self.revealed_words[index]

    def _find_word(self, step: int) -> int | None:
        index = self.current_word_index + step
        while 0 <= index < len(self.all_words):
            if self._is_navigable(index):
                return index
            index += step
        return None

    def _jump_to_word(self, index: int) -> None:
        self.current_word_index = index
        self.initialize_current_word()

    def can_navigate_previous(self) -> bool:
        return self._find_word(-1) is not None

    def can_navigate_next(self) -> bool:
        return self._find_word(1) is not None

    def navigate_to_previous_word(self) -> None:
        index = self._find_word(-1)
        if index is not None:
            self._jump_to_word(index)

    def navigate_to_next_word(self) -> None:
        index = self._find_word(1)
        if index is not None:
            self._jump_to_word(index)

    def go_to_word(self, index: int) -> None:
        if 0 <= index < len(self.all_words) and self._is_navigable(index):
            self._jump_to_word(index)
