import pytest

from valik.matches import StellarMatch, read_alignment_output, write_alignment_output

ATTRS = "1;seq2Range=1280,1378;cigar=97M1D2M;mutations=14A,45G,58T,92C"
ATTRS_EVALUE = "1;seq2Range=1280,1378;eValue=4.05784e-73;cigar=97M1D2M;mutations=14A,45G,58T,92C"
IDS = {"chr1": 0, "chr2": 1}


def fields(dname="chr1", dbegin="100", dend="200", percid="95.5", strand="+", attrs=ATTRS):
    return [dname, "Stellar", "eps-matches", dbegin, dend, percid, strand, ".", attrs]


def make(**kwargs):
    return StellarMatch.from_fields(fields(**kwargs), IDS.__getitem__)


def test_parse_four_attributes():
    m = make()
    assert m.dname == "chr1"
    assert m.ref_ind == IDS["chr1"]
    assert m.dbegin == 100
    assert m.dend == 200
    assert m.percid == "95.5"
    assert m.is_forward_match
    assert m.qname == "1"
    assert m.qbegin == 1280
    assert m.qend == 1378
    assert m.alignment_attributes == "cigar=97M1D2M;mutations=14A,45G,58T,92C"


def test_parse_five_attributes_cigar_and_mutations():
    m = make(attrs=ATTRS_EVALUE)
    assert m.cigar() == "cigar=97M1D2M"
    assert m.mutations() == "mutations=14A,45G,58T,92C"
    assert m.alignment_attributes.startswith("eValue=4.05784e-73;")


def test_reverse_strand():
    assert not make(strand="-").is_forward_match


@pytest.mark.parametrize("attrs", ["1;seq2Range=1,2;cigar=3M", "a;b;c;d;e;f"])
def test_malformed_attributes(attrs):
    with pytest.raises(ValueError, match="Malformed GFF record"):
        make(attrs=attrs)


def test_wrong_column_count():
    with pytest.raises(ValueError):
        StellarMatch.from_fields(fields()[:8], IDS.__getitem__)


@pytest.mark.parametrize("attrs", [ATTRS, ATTRS_EVALUE])
def test_to_gff_reproduces_input(attrs):
    f = fields(attrs=attrs)
    assert make(attrs=attrs).to_gff() == "\t".join(f) + "\n"


def test_roundtrip_through_gff():
    m = make(strand="-", dname="chr2")
    again = StellarMatch.from_fields(m.to_gff().rstrip("\n").split("\t"), IDS.__getitem__)
    assert again == m
    assert again.ref_ind == m.ref_ind
    assert again.percid == m.percid


def test_equality_ignores_percid_but_not_positions():
    assert make(percid="90") == make(percid="99")
    assert not (make(dbegin="101") == make())
    assert not (make(strand="-") == make())


def test_greater_orders_by_reference_then_positions_then_percid():
    assert make(dname="chr2") > make(dname="chr1", dbegin="500")
    assert make(dbegin="150") > make(dbegin="100")
    assert make(dend="300") > make(dend="200")
    assert make(percid="99") > make(percid="90")
    assert not (make(percid="90") > make(percid="99"))


def test_max_uses_ordering():
    items = [make(dbegin="120"), make(dname="chr2", dbegin="5"), make(dbegin="110")]
    assert max(items).dname == "chr2"


def test_length_orders_matches():
    short = make(dbegin="150", dend="200")
    long_ = make(dbegin="100", dend="300")
    assert short.length() < long_.length()
    assert sorted([long_, short], key=StellarMatch.length)[0] is short


def test_percid_is_greater():
    m = make(percid="95.5")
    assert m.percid_is_greater("90")
    assert not m.percid_is_greater("96")


def test_mutations_missing():
    m = make(attrs="1;seq2Range=1,2;cigar=3M;other=x")
    with pytest.raises(ValueError):
        m.mutations()


def test_file_roundtrip(tmp_path):
    path = tmp_path / "out.gff"
    matches = [make(), make(dname="chr2", strand="-", attrs=ATTRS_EVALUE)]
    write_alignment_output(path, matches)
    assert read_alignment_output(path, IDS.__getitem__) == matches


def test_append_mode(tmp_path):
    path = tmp_path / "out.gff"
    write_alignment_output(path, [make()])
    write_alignment_output(path, [make(dbegin="150")], append=True)
    loaded = read_alignment_output(path, IDS.__getitem__)
    assert [m.dbegin for m in loaded] == [100, 150]


def test_overwrite_mode(tmp_path):
    path = tmp_path / "out.gff"
    write_alignment_output(path, [make(), make(dbegin="150")])
    write_alignment_output(path, [make(dbegin="150")])
    assert read_alignment_output(path, IDS.__getitem__) == [make(dbegin="150")]


def test_read_stops_at_single_column_line(tmp_path):
    path = tmp_path / "out.gff"
    path.write_text(make().to_gff() + "segment_file.gff\n" + make(dbegin="150").to_gff())
    assert read_alignment_output(path, IDS.__getitem__) == [make()]


def test_read_rejects_wrong_column_count(tmp_path):
    path = tmp_path / "out.gff"
    path.write_text("a\tb\tc\n")
    with pytest.raises(ValueError):
        read_alignment_output(path, IDS.__getitem__)