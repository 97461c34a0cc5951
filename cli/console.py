"""Console UI for focal application."""

from core.config import CORRECT_WORD_XP, NO_MISTAKES_BONUS, NO_HELP_BONUS
from core.utils import is_letter
from cli.api_client import FocalAPIClient

COMMANDS = {
    ':hint': 'reveal the next letter',
    ':back': 'delete the last letter',
    ':next': 'next sentence',
    ':prev': 'previous sentence',
    ':word+': 'skip to the next word',
    ':word-': 'go back to a skipped word',
    ':source': 'show/hide the English',
    ':reset': 'start the exercise again',
    ':status': 'show session stats',
    ':exit': 'save and quit',
}

# How each slot status is drawn; '{}' is the typed or target letter
SLOT_FORMATS = {
    'correct': '{}',
    'disabled': '{}',
    'focused': '_',
    'empty': '.',
    'incorrect': '[{}]',
    'fadaMissing': '({}´)',
}


def format_current_word(state: dict) -> str:
    """Draw the word being typed slot by slot."""
    word = state['current_word']
    parts = []
    for i, status in enumerate(state['slot_states']):
        typed = state['typed_letters'][i]
        letter = word[i] if status in ('correct', 'disabled') else (typed or '')
        parts.append(SLOT_FORMATS.get(status, '.').format(letter))
    return ''.join(parts)


def format_sentence(state: dict) -> str:
    """Draw the whole sentence: revealed words, the current word, hidden words."""
    rendered = []
    for i, word in enumerate(state['all_words']):
        revealed = state['revealed_words'][i]
        if revealed:
            rendered.append(revealed)
        elif state['punctuation'][i]:
            continue
        elif i == state['current_word_index'] and state['slot_states']:
            rendered.append(format_current_word(state))
        else:
            rendered.append('.' * len(word))
    return ' '.join(rendered)


class ConsoleUI:
    """Console user interface for focal application."""

    def __init__(self, client: FocalAPIClient):
        self.client = client

    def print_state(self, state: dict):
        """Print the current unit with its progress line."""
        unit = state['current_unit'] or {}
        print('\n' + '=' * 50)
        print(f"Sentence {state['unit_index'] + 1}/{state['unit_count']} | "
              f"progress {state['progress']:.0f}% | XP {state['stats']['session_xp']}")
        print('=' * 50)
        if state['show_source_text']:
            print(f"  English: {unit.get('source_text', '')}")
        print(f"\n  {format_sentence(state)}\n")

    def print_feedback(self, state: dict):
        for event in state.get('feedback', []):
            if event == 'letter_incorrect':
                if 'fadaMissing' in state['slot_states']:
                    print('  Almost - that letter needs a fada.')
                else:
                    print('  Not quite, try again.')
            elif event == 'word_complete':
                print('  Word complete!')

    def print_stats(self, stats: dict):
        print('-' * 40)
        print(f"Time: {stats['time_spent_minutes']} min")
        print(f"Mistakes: {stats['mistakes']}")
        print(f"Session XP: {stats['session_xp']}")
        print('-' * 40)

    def print_help(self):
        print(f'Type the Irish letters. A word is worth {CORRECT_WORD_XP} XP, '
              f'+{NO_MISTAKES_BONUS} without mistakes, +{NO_HELP_BONUS} without hints.')
        for command, description in COMMANDS.items():
            print(f'  {command:<8} {description}')

    def choose_exercise(self) -> str | None:
        """Ask which exercise to type. Returns its id or None to quit."""
        exercises = self.client.list_exercises()
        if not exercises:
            print('No exercises available.')
            return None
        print('\nExercises:')
        for i, ex in enumerate(exercises, 1):
            print(f"  {i}. {ex['title']} ({ex['completed_count']}/{ex['unit_count']})")

        while True:
            choice = input('Choose an exercise (number, or "exit"): ').strip()
            if choice.lower() == 'exit':
                return None
            if choice.isdigit() and 1 <= int(choice) <= len(exercises):
                return exercises[int(choice) - 1]['id']
            print('Please enter a number from the list.')

    def type_text(self, text: str) -> dict | None:
        """Send letters one by one, stopping at the first mistake or when the sentence is finished.

        Spaces, apostrophes and punctuation are filled in by the engine, so only
        letters are sent.
        """
        state = None
        for ch in text:
            if not is_letter(ch):
                continue
            state = self.client.type_letter(ch)
            self.print_feedback(state)
            if 'letter_incorrect' in state['feedback']:
                break
            if 'word_complete' in state['feedback'] and all(state['revealed_words']):
                break
        return state

    def print_users(self):
        users = self.client.list_users()
        if not users:
            print('No saved progress yet.')
        for user in users:
            print(f'  {user}')

    def finish(self):
        try:
            result = self.client.finish()
            self.print_stats(result)
            print(f"Score: {result['score']}% | XP earned: {result['xp_awarded']} (total {result['total_xp']})")
        except Exception as e:
            print(f"Error saving progress: {e}")

    def run(self):
        """Run the main application loop."""
        try:
            health = self.client.health_check()
            print(f"Connected to focal server ({health['service']})")
        except Exception:
            print(f"Error: Cannot connect to server at {self.client.base_url}")
            print("Make sure the server is running: python run_server.py")
            return

        exercise_id = self.choose_exercise()
        if exercise_id is None:
            return

        state = self.client.start_session(exercise_id)
        self.print_help()

        while True:
            self.print_state(state)
            if state['can_proceed']:
                if state['is_complete']:
                    print('Exercise complete! ":exit" to save, ":reset" to practise again.')
                else:
                    print('Sentence complete! ":next" for the next one.')

            user_input = input('==> ').strip()
            command = user_input.lower()

            try:
                if command == ':exit':
                    self.finish()
                    print('Slán!')
                    return
                elif command == ':hint':
                    state = self.client.reveal_letter()
                elif command == ':back':
                    state = self.client.backspace()
                elif command == ':next':
                    state = self.client.next_unit()
                elif command == ':prev':
                    state = self.client.previous_unit()
                elif command == ':word+':
                    state = self.client.next_word()
                elif command == ':word-':
                    state = self.client.previous_word()
                elif command == ':source':
                    state = self.client.toggle_source()
                elif command == ':reset':
                    state = self.client.reset()
                elif command == ':status':
                    state = self.client.get_state()
                    self.print_stats(state['stats'])
                elif command.startswith(':'):
                    self.print_help()
                elif user_input:
                    state = self.type_text(user_input) or state
            except Exception as e:
                print(f"Error talking to server: {e}")
