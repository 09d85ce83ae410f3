import re
import logging
from collections import defaultdict

logger = logging.getLogger(__name__)


class TextProcessor:
    # Кодировки, которые пробуются при чтении корпуса (latin-1 читает любые байты)
    ENCODINGS = ('utf-8', 'cp1251', 'latin-1')

    def __init__(self, allowed_chars=None):
        # None - разрешены все символы
        self.allowed_chars = set(allowed_chars) if allowed_chars is not None else None

    @staticmethod
    def read_corpus(file_path):
        """
        Чтение текстового файла целиком с подбором кодировки

        Args:
            file_path: путь к текстовому файлу

        Returns:
            str: содержимое файла
        """
        for encoding in TextProcessor.ENCODINGS:
            try:
                with open(file_path, 'r', encoding=encoding) as f:
                    text = f.read()
            except UnicodeDecodeError:
                logger.warning(f"Файл {file_path} не читается в кодировке {encoding}")
                continue
            logger.info(f"Файл {file_path} прочитан в кодировке {encoding}")
            return text

    def normalize_text(self, text):
        """Нормализация текста: приведение к нижнему регистру и фильтрация символов"""
        text = text.lower()

        # Заменяем все символы, кроме разрешенных, на пробелы
        # и объединяем несколько пробелов в один
        if self.allowed_chars is not None:
            text = ''.join(c if c in self.allowed_chars else ' ' for c in text)
        text = re.sub(r'\s+', ' ', text).strip()

        return text

    @staticmethod
    def count_overall_frequencies(text):
        """Подсчет общих частот символов"""
        frequencies = defaultdict(int)
        for char in text:
            frequencies[char] += 1
        return dict(frequencies)

    @staticmethod
    def iter_windows(text, n):
        """
        Скользящее окно по тексту

        Args:
            text: текст корпуса
            n: длина окна

        Yields:
            tuple: (окно из n символов, следующий за ним символ)
        """
        window = text[:n]
        for next_char in text[n:]:
            yield window, next_char
            window = window[1:] + next_char
