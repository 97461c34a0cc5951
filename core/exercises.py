"""Built-in Irish typing exercises."""

# Irish sentences by exercise: {exercise_id: {title, units: [(english, irish), ...]}}
IRISH_EXERCISES = {
    'greetings': {
        'title': 'Responding to Greetings',
        'units': [
            ('Hello', 'Dia duit'),
            ('Hello to you too', 'Dia is Muire duit'),
            ('Welcome', 'Fáilte'),
            ('Good morning', 'Maidin mhaith'),
            ('Good night', 'Oíche mhaith'),
            ('See you later', 'Feicfidh mé thú'),
        ]
    },
    'introductions': {
        'title': 'Introductions',
        'units': [
            ('What is your name?', 'Cad is ainm duit?'),
            ('I am Seán', 'Is mise Seán.'),
            ('I am Máire', 'Is mise Máire.'),
            ('What is his name?', 'Cad is ainm dó?'),
            ('Her name is Síle', 'Síle is ainm di.'),
            ('Nice to meet you', 'Deas bualadh leat!'),
        ]
    },
    'directions': {
        'title': 'Finding the Way',
        'units': [
            ('Turn left', 'Cas ar chlé'),
            ('Turn right', 'Cas ar dheis'),
            ('Go straight', 'Téigh díreach'),
            ('Go north', 'Téigh ó thuaidh'),
        ]
    },
    'numbers': {
        'title': 'Counting',
        'units': [
            ('One', 'A haon'),
            ('Two', 'A dó'),
            ('Three', 'A trí'),
            ('Four', 'A ceathair'),
            ('Five', 'A cúig'),
            ('Six', 'A sé'),
        ]
    },
}


def get_seed_data() -> list[dict]:
    """Exercises as dicts in Exercise.to_dict() format, unit ids prefixed by exercise."""
    exercises = []
    for exercise_id, data in IRISH_EXERCISES.items():
        units = [
            {'id': f'{exercise_id}-{i + 1}', 'source_text': source, 'target_text': target}
            for i, (source, target) in enumerate(data['units'])
        ]
        exercises.append({
            'id': exercise_id,
            'title': data['title'],
            'language': 'ga',
            'units': units
        })
    return exercises


def init_storage(storage) -> None:
    """Seed storage with the built-in exercises if it has none."""
    if not storage.list_exercises():
        storage.seed_exercises(get_seed_data())
