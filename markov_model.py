from frequency_table import WindowTable
from text_processor import TextProcessor
import random
import time
import logging

logger = logging.getLogger(__name__)


class InsufficientCorpusError(ValueError):
    """Корпус короче длины окна + 1: не из чего построить ни одного перехода"""


class MarkovModel:
    def __init__(self, window_length, seed=None, random_source=None):
        """
        Символьная модель Маркова порядка window_length

        Args:
            window_length: длина окна (положительное целое)
            seed: зерно генератора; None - недетерминированная генерация
            random_source: готовый random.Random, если нужно передать свой
        """
        if isinstance(window_length, bool) or not isinstance(window_length, int) or window_length < 1:
            raise ValueError(f"Длина окна должна быть положительным целым, получено {window_length!r}")

        self.window_length = window_length
        self.random_source = random_source if random_source is not None else random.Random(seed)
        self.char_data_map = {}
        self.processor = TextProcessor()

    def __len__(self):
        return len(self.char_data_map)

    def __contains__(self, window):
        return window in self.char_data_map

    def __str__(self):
        """Текстовое представление всех окон в порядке их первого появления"""
        lines = []
        for window, table in self.char_data_map.items():
            lines.append(f"{window} : {table}\n")
        return ''.join(lines)

    def windows(self):
        return list(self.char_data_map)

    def table(self, window):
        return self.char_data_map.get(window)

    def train(self, corpus_text):
        """
        Обучение модели на тексте

        Args:
            corpus_text: текст корпуса, не короче window_length + 1

        Raises:
            InsufficientCorpusError: если корпус слишком короткий
        """
        if len(corpus_text) < self.window_length + 1:
            raise InsufficientCorpusError(
                f"Длина корпуса {len(corpus_text)} меньше длины окна + 1 ({self.window_length + 1})"
            )

        start_time = time.time()
        updates = 0
        for window, next_char in self.processor.iter_windows(corpus_text, self.window_length):
            table = self.char_data_map.get(window)
            if table is None:
                table = WindowTable()
                self.char_data_map[window] = table
            table.update(next_char)
            updates += 1

        for table in self.char_data_map.values():
            table.finalize_probabilities()

        logger.info(f"Обучение: {updates:,} переходов, {len(self.char_data_map):,} окон, "
                    f"время: {time.time() - start_time:.2f} сек")

    def train_from_file(self, file_path, normalize=False, allowed_chars=None):
        """
        Обучение модели на текстовом файле

        Args:
            file_path: путь к текстовому файлу
            normalize: привести текст к нижнему регистру и схлопнуть пробелы
            allowed_chars: символы, сохраняемые при нормализации (None - все)
        """
        logger.info(f"Чтение файла {file_path}...")
        text = self.processor.read_corpus(file_path)
        logger.info(f"Размер текста: {len(text):,} символов")

        if normalize:
            start_time = time.time()
            text = TextProcessor(allowed_chars).normalize_text(text)
            logger.info(f"После нормализации: {len(text):,} символов, время: {time.time() - start_time:.2f} сек")

        self.train(text)

    def get_random_char(self, table):
        """Случайный символ из таблицы по ее распределению"""
        return table.sample(self.random_source.random())

    def get_probabilities(self, window):
        """
        Вероятности следующего символа для заданного окна

        Returns:
            dict: символ -> вероятность, пустой словарь для неизвестного окна
        """
        table = self.char_data_map.get(window)
        if table is None:
            return {}
        return {record.character: record.probability for record in table}

    def generate(self, seed_text, target_length):
        """
        Генерация текста по обученной модели

        Длина target_length отсчитывается от начального окна: генерация
        прекращается, когда окно вместе с новыми символами достигает
        target_length. Возвращаются только новые символы. Так "aa" при
        target_length=10 дает 8 новых символов, а target_length не больше
        длины окна дает пустую строку. Счет только по новым символам
        (generated < target_length) здесь намеренно не используется.

        Args:
            seed_text: начальный текст, первые window_length символов - окно
            target_length: длина текста вместе с начальным окном

        Returns:
            str: сгенерированное продолжение; seed_text без изменений,
                 если он короче окна
        """
        if isinstance(target_length, bool) or not isinstance(target_length, int) or target_length < 0:
            raise ValueError(f"Длина текста должна быть неотрицательным целым, получено {target_length!r}")

        if len(seed_text) < self.window_length:
            return seed_text

        window = seed_text[:self.window_length]
        generated = []
        while self.window_length + len(generated) < target_length:
            table = self.char_data_map.get(window)
            # Окно не встречалось при обучении - конец генерации
            if table is None:
                logger.debug(f"Окно {window!r} не встречалось, остановка на {len(generated)} символах")
                break

            next_char = self.get_random_char(table)
            generated.append(next_char)
            window = window[1:] + next_char

        return ''.join(generated)

    def get_stats(self):
        """Статистика обученной модели"""
        if not self.char_data_map:
            return {"windows": 0, "total_transitions": 0, "avg_transitions_per_window": 0.0}

        total_transitions = sum(table.total_count() for table in self.char_data_map.values())
        return {
            "windows": len(self.char_data_map),
            "total_transitions": total_transitions,
            "avg_transitions_per_window": total_transitions / len(self.char_data_map)
        }
