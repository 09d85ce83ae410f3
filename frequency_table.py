from collections import OrderedDict


class CharRecord:
    """Статистика одного символа внутри окна"""

    __slots__ = ('character', 'count', 'probability', 'cumulative_probability')

    def __init__(self, character, count=1):
        self.character = character
        self.count = count
        self.probability = 0.0
        self.cumulative_probability = 0.0

    def __repr__(self):
        return f"CharRecord({self.character!r}, count={self.count})"

    def __str__(self):
        return f"({self.character} {self.count} {self.probability} {self.cumulative_probability})"


class WindowTable:
    """
    Таблица частот символов, следующих за одним окном.

    Записи хранятся в порядке "новые сначала": символ, встреченный впервые,
    добавляется в начало таблицы. Этот порядок используется при выборке.
    """

    def __init__(self):
        self._records = OrderedDict()

    def __len__(self):
        return len(self._records)

    def __iter__(self):
        return iter(list(self._records.values()))

    def __contains__(self, character):
        return character in self._records

    def __getitem__(self, index):
        return self.get(index)

    def __str__(self):
        return "(" + " ".join(str(record) for record in self._records.values()) + ")"

    def update(self, character):
        """Увеличивает счетчик символа или добавляет его в начало таблицы"""
        record = self._records.get(character)
        if record is not None:
            record.count += 1
            return

        self._records[character] = CharRecord(character)
        self._records.move_to_end(character, last=False)

    def finalize_probabilities(self):
        """
        Расчет вероятностей и накопленных вероятностей всех записей

        Вызывается после завершения всех update() для данной таблицы.
        Повторный вызов без новых update() дает тот же результат.
        """
        total = sum(record.count for record in self._records.values())
        if total <= 0:
            raise ValueError("Нельзя рассчитать вероятности для пустой таблицы")

        cumulative = 0.0
        for record in self._records.values():
            record.probability = record.count / total
            cumulative += record.probability
            record.cumulative_probability = cumulative

    def sample(self, draw):
        """
        Выбор символа по равномерному значению (обратная функция распределения)

        Args:
            draw: число из [0, 1)

        Returns:
            str: первый символ, у которого накопленная вероятность больше draw
        """
        last = None
        for record in self._records.values():
            if draw < record.cumulative_probability:
                return record.character
            last = record

        if last is None:
            raise IndexError("Выборка из пустой таблицы")
        # draw почти равен 1 и округление не дало попадания
        return last.character

    def index_of(self, character):
        """Позиция записи символа или -1, если символа нет"""
        for index, current in enumerate(self._records):
            if current == character:
                return index
        return -1

    def get(self, index):
        """
        Запись по позиции

        Raises:
            IndexError: если позиция отрицательная или не меньше размера таблицы
        """
        if index < 0 or index >= len(self._records):
            raise IndexError(f"Индекс {index} вне диапазона [0, {len(self._records)})")
        return self.records()[index]

    def remove(self, character):
        """Удаляет запись символа. Возвращает True, если запись была"""
        if character not in self._records:
            return False
        del self._records[character]
        return True

    def records(self):
        """Список записей в порядке таблицы"""
        return list(self._records.values())

    def iter_from(self, index):
        """Итератор по записям, начиная с заданной позиции"""
        if not self._records:
            return iter(())
        if index < 0 or index >= len(self._records):
            raise IndexError(f"Индекс {index} вне диапазона [0, {len(self._records)})")
        return iter(self.records()[index:])

    def total_count(self):
        return sum(record.count for record in self._records.values())
