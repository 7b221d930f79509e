"""Tests for the hashers module."""

import pytest
import xxhash

from catsync.hashers import (
    MASK64,
    FxHash,
    NtHash,
    PolyHash,
    XxHash,
    as_bytes,
    check_window,
)

HASHERS = [FxHash(), PolyHash(), NtHash(), XxHash(), XxHash(seed=42)]


def windows(text, k):
    return [text[i : i + k] for i in range(len(text) - k + 1)]


class TestHasherContract:
    @pytest.mark.parametrize("hasher", HASHERS, ids=repr)
    def test_deterministic(self, hasher, random_dna):
        assert hasher.hash(random_dna[:21]) == hasher.hash(bytes(random_dna[:21]))

    @pytest.mark.parametrize("hasher", HASHERS, ids=repr)
    def test_digest_fits_64_bits(self, hasher, random_dna):
        for kmer in windows(random_dna[:100], 15):
            assert 0 <= hasher.hash(kmer) <= MASK64

    @pytest.mark.parametrize("hasher", HASHERS, ids=repr)
    @pytest.mark.parametrize("k", [1, 2, 7, 31, 32, 33, 64])
    def test_hash_kmers_matches_hash(self, hasher, k, random_dna):
        expected = [hasher.hash(kmer) for kmer in windows(random_dna, k)]
        assert list(hasher.hash_kmers(k, random_dna)) == expected

    @pytest.mark.parametrize("hasher", HASHERS, ids=repr)
    def test_hash_kmers_count(self, hasher, simple_seq):
        assert len(list(hasher.hash_kmers(5, simple_seq))) == len(simple_seq) - 5 + 1

    @pytest.mark.parametrize("hasher", HASHERS, ids=repr)
    def test_whole_text_window(self, hasher, simple_seq):
        assert list(hasher.hash_kmers(len(simple_seq), simple_seq)) == [hasher.hash(simple_seq)]

    @pytest.mark.parametrize("hasher", HASHERS, ids=repr)
    def test_k_larger_than_text_raises(self, hasher):
        with pytest.raises(ValueError):
            hasher.hash_kmers(5, b"ACG")

    @pytest.mark.parametrize("hasher", HASHERS, ids=repr)
    def test_zero_k_raises(self, hasher):
        with pytest.raises(ValueError):
            hasher.hash_kmers(0, b"ACG")

    def test_precondition_checked_before_iteration(self):
        # The error must surface on the call, not on the first next().
        with pytest.raises(ValueError):
            PolyHash().hash_kmers(10, b"ACGT")

    def test_str_input_accepted(self, simple_seq):
        h = NtHash()
        assert list(h.hash_kmers(4, simple_seq.decode())) == list(h.hash_kmers(4, simple_seq))


class TestPolyHash:
    def test_known_value(self):
        # ((65*31 + 67)*31 + 71)*31 + 84
        assert PolyHash().hash(b"ACGT") == 2003087

    def test_wraps_modulo_2_64(self, long_dna):
        assert 0 <= PolyHash().hash(long_dna) <= MASK64

    def test_rolling_with_negative_intermediate(self):
        text = b"\xff" * 40 + b"\x00" * 40
        h = PolyHash()
        assert list(h.hash_kmers(20, text)) == [h.hash(w) for w in windows(text, 20)]


class TestNtHash:
    def test_single_base_is_seed(self):
        assert NtHash().hash(b"A") == 0x3C8BFBB395C60474

    def test_case_insensitive(self):
        h = NtHash()
        assert h.hash(b"acgtacgt") == h.hash(b"ACGTACGT")

    def test_non_acgt_contributes_zero(self):
        assert NtHash().hash(b"N") == 0
        assert NtHash().hash(b"NNNN") == 0

    def test_rolling_over_mixed_case(self, mixed_case_seq):
        h = NtHash()
        for k in (1, 5, 11):
            assert list(h.hash_kmers(k, mixed_case_seq)) == [
                h.hash(w) for w in windows(mixed_case_seq, k)
            ]


class TestFxHash:
    def test_empty(self):
        assert FxHash().hash(b"") == 0

    def test_single_byte(self):
        assert FxHash().hash(b"\x01") == FxHash.SEED

    def test_distinguishes_kmers(self):
        h = FxHash()
        assert h.hash(b"ACGTACGTA") != h.hash(b"ACGTACGTC")


class TestXxHash:
    def test_matches_xxh3(self):
        assert XxHash().hash(b"ACGT") == xxhash.xxh3_64_intdigest(b"ACGT")

    def test_seed_changes_digest(self):
        assert XxHash().hash(b"ACGT") != XxHash(seed=1).hash(b"ACGT")

    def test_equality_by_seed(self):
        assert XxHash(seed=3) == XxHash(seed=3)
        assert XxHash(seed=3) != XxHash()

    def test_seed_reduced_to_64_bits(self):
        assert XxHash(seed=-1).seed == MASK64


class TestHelpers:
    def test_as_bytes(self):
        assert as_bytes("ACGT") == b"ACGT"
        assert as_bytes(bytearray(b"ACGT")) == b"ACGT"
        assert as_bytes(memoryview(b"ACGT")) == b"ACGT"

    def test_check_window(self):
        assert check_window(4, 10) == 7
        assert check_window(10, 10) == 1
        with pytest.raises(ValueError):
            check_window(11, 10)
