import threading
import unittest

from nestedids import DEFAULT_GENERATOR, IdGenerator


class IdGeneratorTest(unittest.TestCase):
    def test_fresh_generator_starts_at_zero(self) -> None:
        generator = IdGenerator()

        self.assertEqual(generator.allocate_next(), 0)
        self.assertEqual(generator.allocate_next(), 1)
        self.assertEqual(generator.allocate_next(), 2)

    def test_initial_value_is_coerced_to_int(self) -> None:
        generator = IdGenerator(initial="5")  # type: ignore[arg-type]

        self.assertEqual(generator.allocate_next(), 5)

    def test_non_numeric_initial_value_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            IdGenerator(initial="abc")  # type: ignore[arg-type]

    def test_peek_does_not_consume(self) -> None:
        generator = IdGenerator(initial=3)

        self.assertEqual(generator.peek(), 3)
        self.assertEqual(generator.peek(), 3)
        self.assertEqual(generator.allocate_next(), 3)
        self.assertEqual(generator.peek(), 4)

    def test_concurrent_allocation_hands_out_unique_ids(self) -> None:
        generator = IdGenerator()
        seen = []
        seen_lock = threading.Lock()

        def worker() -> None:
            for _ in range(200):
                value = generator.allocate_next()
                with seen_lock:
                    seen.append(value)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(sorted(seen), list(range(800)))

    def test_default_generator_is_shared(self) -> None:
        start = DEFAULT_GENERATOR.peek()

        self.assertEqual(DEFAULT_GENERATOR.allocate_next(), start)
        self.assertEqual(DEFAULT_GENERATOR.peek(), start + 1)


if __name__ == "__main__":  # pragma: no cover - convenience
    unittest.main()
