"""Tests for the annotation module."""

import pytest

from lipid_adducts.annotation import Annotation
from lipid_adducts.catalog import AdductCatalog
from lipid_adducts.detection import AdductDetector
from lipid_adducts.models import IonizationMode, Lipid, Peak


@pytest.fixture
def lipid():
    return Lipid("PC 34:1", compound_id=1, formula="C42H82NO8P",
                 lipid_type="PC", carbon_count=34, double_bonds_count=1)


@pytest.fixture
def pinned_detector():
    return AdductDetector(AdductCatalog(
        {
            "[M+Na]+": -22.989218,
            "[M+H]+": -1.007276,
            "[M+Y]+": -2.010676,
        },
        {"[M-H]-": 1.007276},
    ))


class TestAdductDetection:
    def test_detected_from_pair(self, lipid, pinned_detector):
        peaks = {Peak(500.2500, 100000.0), Peak(501.2534, 40000.0)}
        ann = Annotation(lipid, 500.2500, 100000.0, 6.0, IonizationMode.POSITIVE,
                         peaks, detector=pinned_detector)
        assert ann.adduct == "[M+H]+"

    def test_single_peak_uses_fallback(self, lipid, pinned_detector):
        ann = Annotation(lipid, 500.2500, 100000.0, 6.0, IonizationMode.POSITIVE,
                         [Peak(500.2500, 100000.0)], detector=pinned_detector)
        assert ann.adduct == "[M+Na]+"

    def test_unset_without_match(self, lipid):
        detector = AdductDetector(AdductCatalog({"[M+H]+": -1.007276}, {}))
        ann = Annotation(lipid, 758.5700, 5000.0, 6.0, IonizationMode.NEGATIVE,
                         detector=detector)
        assert ann.adduct is None

    def test_default_detector(self, lipid):
        peaks = [Peak(760.5851, 1e5), Peak(782.5670, 3e4)]
        ann = Annotation(lipid, 760.5851, 1e5, 6.0, IonizationMode.POSITIVE, peaks)
        assert ann.adduct == "[M+H]+"

    def test_set_adduct(self, lipid):
        ann = Annotation(lipid, 760.5851, 1e5, 6.0, IonizationMode.POSITIVE)
        ann.adduct = "[M+Na]+"
        assert ann.adduct == "[M+Na]+"


class TestGroupedSignals:
    def test_deduplicated_and_sorted(self, lipid):
        peaks = [Peak(782.5670, 3e4), Peak(760.5851, 1e5), Peak(760.5851, 1e5)]
        ann = Annotation(lipid, 760.5851, 1e5, 6.0, IonizationMode.POSITIVE, peaks)
        assert ann.grouped_signals == (Peak(760.5851, 1e5), Peak(782.5670, 3e4))

    def test_immutable(self, lipid):
        ann = Annotation(lipid, 760.5851, 1e5, 6.0, IonizationMode.POSITIVE)
        assert ann.grouped_signals == ()
        with pytest.raises(AttributeError):
            ann.grouped_signals = (Peak(760.5851, 1e5),)

    def test_source_not_shared(self, lipid):
        peaks = [Peak(760.5851, 1e5)]
        ann = Annotation(lipid, 760.5851, 1e5, 6.0, IonizationMode.POSITIVE, peaks)
        peaks.append(Peak(782.5670, 3e4))
        assert len(ann.grouped_signals) == 1


class TestScore:
    def test_add_score(self, lipid):
        ann = Annotation(lipid, 760.5851, 1e5, 6.0, IonizationMode.POSITIVE)
        ann.add_score(1)
        ann.add_score(-1)
        ann.add_score(1)
        assert ann.score == 1
        assert ann.total_scores_applied == 3
        assert ann.normalized_score() == pytest.approx(1 / 3)

    def test_normalized_without_scores(self, lipid):
        ann = Annotation(lipid, 760.5851, 1e5, 6.0, IonizationMode.POSITIVE)
        assert ann.normalized_score() is None


class TestIdentity:
    def test_equality_ignores_adduct_and_score(self, lipid):
        a = Annotation(lipid, 760.5851, 1e5, 6.0, IonizationMode.POSITIVE)
        b = Annotation(lipid, 760.5851, 2e5, 6.0, IonizationMode.POSITIVE,
                       [Peak(760.5851, 1e5), Peak(782.5670, 3e4)])
        b.adduct = "[M+Na]+"
        b.add_score(1)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_different_rt(self, lipid):
        a = Annotation(lipid, 760.5851, 1e5, 6.0, IonizationMode.POSITIVE)
        b = Annotation(lipid, 760.5851, 1e5, 7.5, IonizationMode.POSITIVE)
        assert a != b

    def test_different_lipid(self, lipid):
        a = Annotation(lipid, 760.5851, 1e5, 6.0, IonizationMode.POSITIVE)
        b = Annotation(Lipid("PE 36:1"), 760.5851, 1e5, 6.0, IonizationMode.POSITIVE)
        assert a != b

    def test_repr(self, lipid):
        ann = Annotation(lipid, 760.5851, 100000.0, 6.0, IonizationMode.POSITIVE)
        assert repr(ann) == ("Annotation(PC 34:1, mz=760.5851, RT=6.00, adduct=[M+H]+, "
                             "intensity=100000.0, score=0)")
