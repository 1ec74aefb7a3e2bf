"""Tests pour le module formatting."""

import math
from datetime import datetime

import pytest

from inifile_utils.errors import UnknownCultureError
from inifile_utils.formatting import (
    INVARIANT_CULTURE,
    CultureFormatProvider,
    FormatProvider,
    available_cultures,
    format_bool,
    format_integer,
    get_culture,
    parse_bool,
    parse_integer,
)


class TestInvariantConversions:
    """Tests des conversions booléen et entier."""

    @pytest.mark.parametrize("text", ["true", "True", "TRUE", " true "])
    def test_parse_bool_true(self, text):
        """Les variantes de casse de true sont acceptées."""
        assert parse_bool(text) is True

    def test_parse_bool_false(self):
        """false est accepté sans tenir compte de la casse."""
        assert parse_bool("fAlSe") is False

    @pytest.mark.parametrize("text", ["23", "1", "yes", "", "truee"])
    def test_parse_bool_invalide(self, text):
        """Tout autre texte est refusé."""
        with pytest.raises(ValueError):
            parse_bool(text)

    def test_format_bool(self):
        """Les booléens s'écrivent True/False."""
        assert format_bool(True) == "True"
        assert format_bool(False) == "False"

    @pytest.mark.parametrize(
        "text, expected",
        [("23", 23), ("-99", -99), ("+7", 7), (" 42 ", 42), ("007", 7)],
    )
    def test_parse_integer(self, text, expected):
        """Entiers base 10 avec signe optionnel."""
        assert parse_integer(text) == expected

    @pytest.mark.parametrize(
        "text", ["1,000", "1_000", "1.5", "0x1F", "", "-", "١٢"]
    )
    def test_parse_integer_invalide(self, text):
        """Séparateurs, décimales et chiffres non ASCII sont refusés."""
        with pytest.raises(ValueError):
            parse_integer(text)

    def test_format_integer(self):
        """Les entiers s'écrivent sans séparateur."""
        assert format_integer(1234567) == "1234567"
        assert format_integer(-5) == "-5"


class TestCultureFormatProvider:
    """Tests pour CultureFormatProvider."""

    def test_implements_interface(self):
        """Chaque culture implémente FormatProvider."""
        for name in available_cultures():
            assert isinstance(get_culture(name), FormatProvider)

    def test_parse_float_invariant(self):
        """La culture invariante utilise le point."""
        assert INVARIANT_CULTURE.parse_float("1.23") == 1.23
        assert INVARIANT_CULTURE.parse_float("-1.5E3") == -1500.0
        assert INVARIANT_CULTURE.parse_float(".5") == 0.5

    def test_parse_float_allemand(self):
        """de-DE utilise la virgule comme séparateur décimal."""
        de = get_culture("de-DE")
        assert de.parse_float("1,23") == 1.23

    def test_separateur_de_milliers_refuse(self):
        """Le séparateur de milliers n'est pas accepté."""
        with pytest.raises(ValueError):
            INVARIANT_CULTURE.parse_float("1,23")
        with pytest.raises(ValueError):
            get_culture("de-DE").parse_float("1.23")

    def test_parse_float_symboles(self):
        """NaN et infinis utilisent les symboles de la culture."""
        assert math.isnan(INVARIANT_CULTURE.parse_float("NaN"))
        assert INVARIANT_CULTURE.parse_float("Infinity") == math.inf
        assert INVARIANT_CULTURE.parse_float("-Infinity") == -math.inf
        assert get_culture("de-DE").parse_float("-∞") == -math.inf

    @pytest.mark.parametrize("text", ["", "abc", "1.2.3", "e5", "1e"])
    def test_parse_float_invalide(self, text):
        """Les textes non numériques sont refusés."""
        with pytest.raises(ValueError):
            INVARIANT_CULTURE.parse_float(text)

    @pytest.mark.parametrize(
        "value, expected",
        [
            (23.42, "23.42"),
            (1.0, "1"),
            (-3.0, "-3"),
            (1e-05, "1E-05"),
            (1.5e20, "1.5E+20"),
            (1e15, "1000000000000000"),
            (9999999999999998.0, "9999999999999998"),
            (1e16, "1E+16"),
            (-0.0, "-0"),
            (math.inf, "Infinity"),
        ],
    )
    def test_format_float_invariant(self, value, expected):
        """Formatage le plus court avec exposant E+NN."""
        assert INVARIANT_CULTURE.format_float(value) == expected

    def test_zero_negatif_conserve(self):
        """Le signe de -0.0 survit à l'écriture puis à la relecture."""
        text = INVARIANT_CULTURE.format_float(-0.0)
        assert math.copysign(1.0, INVARIANT_CULTURE.parse_float(text)) == -1.0

    def test_format_float_allemand(self):
        """de-DE écrit la virgule."""
        assert get_culture("de-DE").format_float(23.42) == "23,42"

    def test_format_float_nan(self):
        """NaN s'écrit avec le symbole de la culture."""
        assert INVARIANT_CULTURE.format_float(math.nan) == "NaN"

    def test_format_datetime_invariant(self):
        """Motif général : date courte puis heure longue."""
        value = datetime(2024, 3, 9, 14, 5, 7)
        assert INVARIANT_CULTURE.format_datetime(value) == "03/09/2024 14:05:07"

    def test_format_datetime_allemand(self):
        """de-DE utilise jour.mois.année."""
        value = datetime(2024, 3, 9, 14, 5, 7)
        assert get_culture("de-DE").format_datetime(value) == "09.03.2024 14:05:07"

    def test_parse_datetime_motifs(self):
        """La lecture libre accepte le motif général, la date seule et ISO."""
        fr = get_culture("fr-FR")
        assert fr.parse_datetime("09/03/2024 14:05:07") == datetime(
            2024, 3, 9, 14, 5, 7
        )
        assert fr.parse_datetime("09/03/2024") == datetime(2024, 3, 9)
        assert fr.parse_datetime("2024-03-09T14:05:07") == datetime(
            2024, 3, 9, 14, 5, 7
        )

    def test_indicateurs_am_pm_americains(self):
        """en-US écrit AM/PM depuis la culture, sans dépendre de la locale."""
        us = get_culture("en-US")
        soir = datetime(2024, 12, 31, 23, 59, 58)
        minuit = datetime(2024, 1, 2, 0, 15, 0)
        midi = datetime(2024, 1, 2, 12, 30, 0)

        assert us.format_datetime(soir) == "12/31/2024 11:59:58 PM"
        assert us.format_datetime(minuit) == "01/02/2024 12:15:00 AM"
        assert us.format_datetime(midi) == "01/02/2024 12:30:00 PM"
        for value in (soir, minuit, midi):
            assert us.parse_datetime(us.format_datetime(value)) == value

    def test_indicateurs_personnalises(self):
        """Les indicateurs de la culture remplacent %p."""
        culture = CultureFormatProvider(
            "test", long_time_pattern="%I:%M %p",
            am_designator="a.m.", pm_designator="p.m.",
        )
        value = datetime(2024, 5, 6, 15, 45)
        text = culture.format_datetime_exact(value, "%I:%M %p")

        assert text == "03:45 p.m."
        assert culture.parse_datetime_exact(text, "%I:%M %p") == datetime(
            1900, 1, 1, 15, 45
        )

    def test_heure_24h_en_lecture_americaine(self):
        """en-US accepte aussi l'heure sur 24 heures en lecture libre."""
        assert get_culture("en-US").parse_datetime(
            "12/31/2024 23:59:58"
        ) == datetime(2024, 12, 31, 23, 59, 58)

    def test_parse_datetime_invalide(self):
        """Un texte sans motif reconnu est refusé."""
        with pytest.raises(ValueError, match="Date invalide"):
            INVARIANT_CULTURE.parse_datetime("demain")

    def test_datetime_exact(self):
        """Les motifs explicites sont appliqués tels quels."""
        value = datetime(2024, 3, 9, 14, 5)
        text = INVARIANT_CULTURE.format_datetime_exact(value, "%Y%m%d-%H%M")
        assert text == "20240309-1405"
        assert INVARIANT_CULTURE.parse_datetime_exact(text, "%Y%m%d-%H%M") == value

    def test_culture_immuable(self):
        """Les cultures sont des dataclasses figées."""
        with pytest.raises(AttributeError):
            INVARIANT_CULTURE.decimal_separator = ","

    def test_culture_personnalisee(self):
        """Une culture peut être construite directement."""
        custom = CultureFormatProvider("x-test", decimal_separator="'")
        assert custom.name == "x-test"
        assert custom.parse_float("3'5") == 3.5


class TestRegistry:
    """Tests du registre des cultures."""

    def test_cultures_disponibles(self):
        """Les cultures prédéfinies sont enregistrées."""
        assert set(available_cultures()) == {
            "invariant", "en-US", "en-GB", "de-DE", "fr-FR"
        }

    def test_get_culture_invariant(self):
        """get_culture retourne l'instance invariante partagée."""
        assert get_culture("invariant") is INVARIANT_CULTURE

    def test_get_culture_inconnue(self):
        """Un nom inconnu lève UnknownCultureError."""
        with pytest.raises(UnknownCultureError):
            get_culture("xx-XX")
