from pixcode.pix.normalize import normalize_text, strip_accents, to_printable_ascii


class TestStripAccents:
    def test_no_accents(self):
        assert strip_accents("Hello") == "Hello"

    def test_accents(self):
        assert strip_accents("João") == "Joao"

    def test_cedilla(self):
        assert strip_accents("Março") == "Marco"

    def test_uppercase(self):
        assert strip_accents("SÃO JOSÉ") == "SAO JOSE"


class TestToPrintableAscii:
    def test_drops_non_ascii(self):
        assert to_printable_ascii("Café ☕ Bar") == "Cafe Bar"

    def test_collapses_whitespace(self):
        assert to_printable_ascii("  Rio\tde\n Janeiro ") == "Rio de Janeiro"

    def test_keeps_punctuation(self):
        assert to_printable_ascii("D'Ávila & Cia.") == "D'Avila & Cia."

    def test_only_unencodable(self):
        assert to_printable_ascii("東京") == ""


class TestNormalizeText:
    def test_without_limit(self):
        assert normalize_text("São José dos Campos") == "Sao Jose dos Campos"

    def test_truncates(self):
        assert normalize_text("São José dos Campos", 15) == "Sao Jose dos Ca"

    def test_truncation_after_accent_stripping(self):
        assert normalize_text("É" * 30, 25) == "E" * 25

    def test_strips_trailing_space_left_by_cut(self):
        assert normalize_text("ABCDEFGHIJKLMN OPQ", 15) == "ABCDEFGHIJKLMN"

    def test_short_text_unchanged(self):
        assert normalize_text("JOAO SILVA", 25) == "JOAO SILVA"
