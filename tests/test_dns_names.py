"""Unit tests for conversion between Unicode domains and dnspython names."""

import dns.name
import pytest

from idn_punycode.dns_names import from_dns_name, to_dns_name


@pytest.mark.unit
class TestToDnsName:
    """Test building dnspython names from Unicode domains."""

    def test_unicode_domain(self):
        """Test a Unicode domain becomes an absolute ACE name."""
        name = to_dns_name("ma\xF1ana.com")

        assert name == dns.name.from_text("xn--maana-pta.com.")
        assert name.is_absolute()
        assert name.to_text() == "xn--maana-pta.com."

    def test_ascii_domain_unchanged(self):
        """Test an ASCII domain is passed through."""
        assert to_dns_name("www.example.com").to_text() == "www.example.com."

    def test_ideographic_separators(self):
        """Test RFC 3490 separators are normalized before parsing."""
        assert to_dns_name("ma\xF1ana\u3002com").to_text() == "xn--maana-pta.com."

    def test_label_too_long(self):
        """Test an encoded label longer than 63 octets is rejected."""
        with pytest.raises(dns.name.LabelTooLong):
            to_dns_name("\xFC" * 70 + ".com")

    def test_name_too_long(self):
        """Test a name longer than 255 octets is rejected."""
        with pytest.raises(dns.name.NameTooLong):
            to_dns_name(".".join(["a" * 60] * 5))

    def test_empty_label(self):
        """Test consecutive separators are rejected."""
        with pytest.raises(dns.name.EmptyLabel):
            to_dns_name("b\xFCcher..com")


@pytest.mark.unit
class TestFromDnsName:
    """Test rendering dnspython names as Unicode text."""

    def test_ace_name(self):
        """Test ACE labels are decoded and the final dot is dropped."""
        name = dns.name.from_text("xn--bcher-kva.com.")

        assert from_dns_name(name) == "b\xFCcher.com"

    def test_round_trip(self):
        """Test a Unicode domain survives a trip through dnspython."""
        domain = "\u4e2d\u56fd.b\xFCcher.example"

        assert from_dns_name(to_dns_name(domain)) == domain
