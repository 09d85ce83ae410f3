from markov_model import MarkovModel, InsufficientCorpusError
from config import load_settings
import argparse
import os
import sys
import logging

logger = logging.getLogger(__name__)


def build_parser(settings):
    parser = argparse.ArgumentParser(description='Символьная модель Маркова: обучение на файле и генерация текста')
    parser.add_argument('window_length', type=int, nargs='?', default=settings['window_length'],
                        help='Длина окна (порядок модели)')
    parser.add_argument('initial_text', nargs='?', default=settings['initial_text'],
                        help='Начальный текст, первые window_length символов задают окно')
    parser.add_argument('length', type=int, nargs='?', default=settings['output_length'],
                        help='Длина текста вместе с начальным окном')
    parser.add_argument('mode', nargs='?', choices=['random', 'fixed'],
                        default='random' if settings['seed'] is None else 'fixed',
                        help='random - случайная генерация, fixed - с фиксированным зерном')
    parser.add_argument('corpus', nargs='?', default=settings['corpus'], help='Текстовый файл для обучения')
    parser.add_argument('--seed', type=int, default=settings['seed'], help='Зерно для режима fixed')
    parser.add_argument('--normalize', action='store_true', help='Нормализовать корпус перед обучением')
    parser.add_argument('--allowed-chars', default=None,
                        help='Символы, сохраняемые при нормализации, остальные заменяются пробелом')
    parser.add_argument('--dump', action='store_true', help='Вывести таблицы модели')
    parser.add_argument('--log-level', default=settings['log_level'], help='Уровень логирования')
    return parser


def main(argv=None):
    settings = load_settings()
    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if not args.corpus or not os.path.exists(args.corpus):
        logger.error(f"Файл '{args.corpus}' не найден!")
        return 1
    if args.initial_text is None:
        logger.error("Не задан начальный текст")
        return 1

    seed = None
    if args.mode == 'fixed':
        seed = args.seed if args.seed is not None else settings['fixed_seed']

    # Создаем и обучаем модель
    try:
        model = MarkovModel(args.window_length, seed=seed)
        model.train_from_file(args.corpus, normalize=args.normalize, allowed_chars=args.allowed_chars)

        if args.dump:
            print(model, end='')

        generated = model.generate(args.initial_text, args.length)
    except InsufficientCorpusError as e:
        logger.error(f"Ошибка обучения: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Ошибка: {e}")
        return 1

    print(generated)
    return 0


if __name__ == "__main__":
    sys.exit(main())
