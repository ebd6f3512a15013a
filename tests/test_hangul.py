"""Tests for Hangul decomposition and coda classification."""

import pytest

from josa.errors import EmptyInput
from josa.hangul import (
    HANGUL_BASE, HANGUL_END, JONGSEONG_COUNT, Coda,
    classify, decompose, ends_with_rieul, has_batchim, is_syllable, jongseong_index,
)

ALL_SYLLABLES = [chr(cp) for cp in range(HANGUL_BASE, HANGUL_END + 1)]


class TestDecompose:
    def test_han(self):
        assert decompose("한") == (18, 0, 4)  # ㅎ ㅏ ㄴ

    def test_first_and_last(self):
        assert decompose("가") == (0, 0, 0)
        assert decompose("힣") == (18, 20, 27)

    def test_not_hangul(self):
        with pytest.raises(ValueError):
            decompose("a")

    def test_multiple_chars(self):
        with pytest.raises(ValueError):
            decompose("한글")

    def test_jongseong_index(self):
        assert jongseong_index("갈") == 8  # ㄹ
        assert jongseong_index("나") == 0
        assert jongseong_index("x") is None


class TestClassify:
    def test_with_batchim(self):
        assert classify("한") is Coda.HAS_CODA  # ㄴ batchim
        assert classify("낚") is Coda.HAS_CODA  # ㄲ batchim

    def test_without_batchim(self):
        assert classify("나") is Coda.NO_CODA
        assert classify("머") is Coda.NO_CODA

    def test_uses_last_character(self):
        assert classify("유진") is Coda.HAS_CODA
        assert classify("고등어") is Coda.NO_CODA
        assert classify("Alice프리렌") is Coda.HAS_CODA
        assert classify("데nji") is Coda.NOT_HANGUL

    def test_every_syllable(self):
        for char in ALL_SYLLABLES:
            expected = Coda.NO_CODA if decompose(char)[2] == 0 else Coda.HAS_CODA
            assert classify(char) is expected, char

    def test_no_coda_count(self):
        # one syllable in 28 has no coda
        no_coda = [c for c in ALL_SYLLABLES if classify(c) is Coda.NO_CODA]
        assert len(no_coda) == len(ALL_SYLLABLES) // JONGSEONG_COUNT

    @pytest.mark.parametrize("text", [
        "a", "table", "1", "!", " ",
        chr(HANGUL_BASE - 1), chr(HANGUL_END + 1),
        "\u3131",  # compatibility jamo ㄱ
        "\u1100",  # conjoining choseong
        "漢",
    ])
    def test_not_hangul(self, text):
        assert classify(text) is Coda.NOT_HANGUL

    def test_trailing_combining_mark(self):
        assert classify("가\u0301") is Coda.NOT_HANGUL
        assert classify("진\u200d") is Coda.NOT_HANGUL

    def test_empty(self):
        with pytest.raises(EmptyInput):
            classify("")


class TestHasBatchim:
    def test_with_batchim(self):
        assert has_batchim("한") is True
        assert has_batchim("갈") is True  # ㄹ batchim

    def test_without_batchim(self):
        assert has_batchim("나") is False

    def test_english(self):
        assert has_batchim("a") is False

    def test_empty(self):
        with pytest.raises(EmptyInput):
            has_batchim("")


class TestEndsWithRieul:
    def test_rieul(self):
        assert ends_with_rieul("서울") is True
        assert ends_with_rieul("연필") is True

    def test_other(self):
        assert ends_with_rieul("집") is False
        assert ends_with_rieul("학교") is False
        assert ends_with_rieul("mail") is False


class TestIsSyllable:
    def test_range(self):
        assert is_syllable("가")
        assert is_syllable("힣")
        assert not is_syllable("ㅏ")
        assert not is_syllable("")
