import os
from dotenv import load_dotenv

load_dotenv()


def _get_int(name, default):
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Переменная окружения {name} должна быть целым числом, получено {value!r}")


def load_settings():
    """
    Настройки модели из переменных окружения и файла .env

    Returns:
        dict: длина окна, зерно генератора, длина текста и т.д.
    """
    return {
        'window_length': _get_int('MARKOV_WINDOW_LENGTH', 3),
        'seed': _get_int('MARKOV_SEED', None),
        'fixed_seed': _get_int('MARKOV_FIXED_SEED', 20),
        'output_length': _get_int('MARKOV_OUTPUT_LENGTH', 100),
        'initial_text': os.getenv('MARKOV_INITIAL_TEXT'),
        'corpus': os.getenv('MARKOV_CORPUS'),
        'log_level': os.getenv('MARKOV_LOG_LEVEL', 'INFO').upper(),
    }
