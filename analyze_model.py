from markov_model import MarkovModel
from text_processor import TextProcessor
import matplotlib.pyplot as plt
import numpy as np
import argparse
import sys
import logging

logger = logging.getLogger(__name__)


def overall_frequencies(text, top=20):
    """
    Самые частые символы корпуса

    Returns:
        list: (символ, частота, вероятность), по убыванию частоты
    """
    frequencies = TextProcessor.count_overall_frequencies(text)
    total = sum(frequencies.values())
    results = sorted(frequencies.items(), key=lambda x: x[1], reverse=True)[:top]
    return [(symbol, freq, freq / total if total > 0 else 0) for symbol, freq in results]


def analyze_orders(text, max_order=5):
    #Сравнение моделей разных порядков на одном корпусе
    orders = []
    window_counts = []
    transition_counts = []

    for n in range(1, max_order + 1):
        if len(text) < n + 1:
            logger.warning(f"Корпус слишком короткий для порядка {n}")
            break
        model = MarkovModel(n)
        model.train(text)
        stats = model.get_stats()

        orders.append(n)
        window_counts.append(stats['windows'])
        transition_counts.append(stats['total_transitions'])

    return orders, window_counts, transition_counts


def window_entropy(table):
    """Энтропия распределения следующего символа, в битах"""
    probabilities = np.array([record.probability for record in table], dtype=float)
    probabilities = probabilities[probabilities > 0]
    return float(-np.sum(probabilities * np.log2(probabilities)))


def average_entropy(model, min_total=1):
    #Средняя энтропия по окнам, у которых не меньше min_total наблюдений
    entropies = [
        window_entropy(model.table(window))
        for window in model.windows()
        if model.table(window).total_count() >= min_total
    ]
    return float(np.mean(entropies)) if entropies else 0.0


def plot_orders(orders, window_counts, transition_counts, output_path):
    # График 1: Количество окон
    fig = plt.figure(figsize=(12, 5))

    plt.subplot(1, 2, 1)
    plt.plot(orders, window_counts, 'bo-', linewidth=2, markersize=8)
    plt.xlabel('Порядок модели (n)')
    plt.ylabel('Количество уникальных окон')
    plt.title('Рост числа окон с увеличением порядка')
    plt.grid(True, alpha=0.3)
    plt.yscale('log')

    # График 2: Общее количество переходов
    plt.subplot(1, 2, 2)
    plt.plot(orders, transition_counts, 'ro-', linewidth=2, markersize=8)
    plt.xlabel('Порядок модели (n)')
    plt.ylabel('Общее количество переходов')
    plt.title('Суммарная частота всех переходов')
    plt.grid(True, alpha=0.3)
    plt.yscale('log')

    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    logger.info(f"Графики сохранены в '{output_path}'")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Анализ символьной модели Маркова')
    parser.add_argument('corpus', help='Текстовый файл для анализа')
    parser.add_argument('--max-order', type=int, default=5, help='Максимальный порядок модели')
    parser.add_argument('--output', default='markov_analysis.png', help='Файл для графиков')
    parser.add_argument('--normalize', action='store_true', help='Нормализовать корпус')
    parser.add_argument('--allowed-chars', default=None, help='Символы, сохраняемые при нормализации')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    processor = TextProcessor(args.allowed_chars)
    text = processor.read_corpus(args.corpus)
    if args.normalize:
        text = processor.normalize_text(text)

    print("ОБЩИЕ ЧАСТОТЫ СИМВОЛОВ")
    print("-" * 40)
    print(f"{'Символ':<10} {'Частота':<12} {'Вероятность':<12}")
    print("-" * 40)
    for symbol, freq, prob in overall_frequencies(text):
        symbol_display = repr(symbol).replace("'", "")
        print(f"{symbol_display:<10} {freq:<12,} {prob:.6f}")

    print("\nСРАВНЕНИЕ ПОРЯДКОВ МОДЕЛИ")
    orders, window_counts, transition_counts = analyze_orders(text, args.max_order)
    for n, windows, transitions in zip(orders, window_counts, transition_counts):
        print(f"Порядок {n:2d}: {windows:>10,} окон, {transitions:>15,} переходов")

    if not orders:
        logger.error("Корпус слишком короткий для анализа")
        return 1

    plot_orders(orders, window_counts, transition_counts, args.output)

    print("\nРАСЧЕТ ЭНТРОПИИ")
    for n in orders:
        model = MarkovModel(n)
        model.train(text)
        print(f"Средняя энтропия для порядка {n}: {average_entropy(model):.4f} бит")

    return 0


if __name__ == "__main__":
    sys.exit(main())
