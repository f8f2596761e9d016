import unittest

from sondeo_core.text_utils import is_relevant, normalize_text, query_tokens, truncate_text


class TestIsRelevant(unittest.TestCase):
    def test_accents_are_ignored_on_both_sides(self):
        self.assertTrue(is_relevant("Desarrollo Económico", "economico"))
        self.assertTrue(is_relevant("Desarrollo Económico", "económico"))
        self.assertTrue(is_relevant("Desarrollo Economico", "ECONÓMICO"))

    def test_short_tokens_only_is_never_relevant(self):
        self.assertFalse(is_relevant("el la de los temas", "el la de"))

    def test_empty_inputs(self):
        self.assertFalse(is_relevant("", "agua potable"))
        self.assertFalse(is_relevant("agua potable", ""))

    def test_single_keyword_hit_is_enough(self):
        self.assertTrue(is_relevant("Crisis del agua en la capital", "agua potable rural"))

    def test_no_hit(self):
        self.assertFalse(is_relevant("Resultados del fútbol", "xyz123nonsense"))

    def test_substring_match(self):
        self.assertTrue(is_relevant("Los presupuestos municipales", "presupuesto"))

    def test_query_tokens_split_on_punctuation(self):
        self.assertEqual(query_tokens("¿Niñez, educación y salud?"), ["ninez", "educacion", "salud"])

    def test_normalize_text(self):
        self.assertEqual(normalize_text("Árbol Ñandú"), "arbol nandu")


class TestTruncateText(unittest.TestCase):
    def test_exact_length(self):
        s = "a" * 200 + "b" * 300
        out = truncate_text(s, 220)
        self.assertEqual(len(out), 223)
        self.assertTrue(out.startswith(s[:220]))
        self.assertTrue(out.endswith("..."))

    def test_idempotent(self):
        for s in ["", "corto", "x" * 220, "y" * 221, "z" * 500]:
            once = truncate_text(s, 220)
            self.assertEqual(truncate_text(once, 220), once)

    def test_short_text_unchanged(self):
        self.assertEqual(truncate_text("hola mundo"), "hola mundo")
        self.assertEqual(truncate_text("x" * 220), "x" * 220)

    def test_empty_or_none(self):
        self.assertEqual(truncate_text(None), "")
        self.assertEqual(truncate_text(""), "")


if __name__ == "__main__":
    unittest.main()
