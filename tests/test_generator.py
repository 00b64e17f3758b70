import threading

import pytest

from passgen.errors import EmptyPoolError, IndexSourceError
from passgen.generator import PasswordGenerator, generate_n_passwords, generate_password
from passgen.pool import Pool
from passgen.random_source import SystemIndexSource, default_source


def test_password_from_digits_pool(digits_pool):
    password = generate_password(digits_pool, 15)
    assert len(password) == 15
    assert all(ch in "123456789" for ch in password)


@pytest.mark.parametrize("length", [0, 1, 7, 64])
def test_password_has_exact_length(digits_pool, length):
    assert len(generate_password(digits_pool, length)) == length


def test_zero_length_gives_empty_password(digits_pool):
    assert generate_password(digits_pool, 0) == ""


def test_single_char_pool():
    pool = Pool.parse("a")
    assert generate_password(pool, 5) == "aaaaa"


def test_n_passwords_from_parsed_pool():
    pool = Pool.parse("1234567")
    passwords = generate_n_passwords(pool, 15, 100)
    assert len(passwords) == 100
    for pwd in passwords:
        assert len(pwd) == 15
        assert set(pwd) <= set("1234567")


def test_zero_count_gives_empty_list(digits_pool):
    assert generate_n_passwords(digits_pool, 15, 0) == []


def test_empty_pool_is_rejected():
    with pytest.raises(EmptyPoolError):
        generate_password(Pool(), 15)
    with pytest.raises(EmptyPoolError):
        generate_password(Pool(), 0)
    with pytest.raises(EmptyPoolError):
        generate_n_passwords(Pool(), 15, 0)


@pytest.mark.parametrize("bad", [-1, 2.5, "3", True, None])
def test_invalid_length_raises(digits_pool, bad):
    with pytest.raises(ValueError):
        generate_password(digits_pool, bad)


def test_negative_count_raises(digits_pool):
    with pytest.raises(ValueError):
        generate_n_passwords(digits_pool, 5, -1)


def test_fake_source_picks_given_indices(fake_source):
    pool = Pool.parse("abcd")
    src = fake_source([3, 0, 2, 1])
    assert generate_password(pool, 6, src) == "dacbda"
    assert src.calls == [4] * 6


def test_batch_uses_source_in_generation_order(fake_source):
    pool = Pool.parse("xy")
    src = fake_source([0, 0, 1, 1, 0, 1])
    assert generate_n_passwords(pool, 2, 3, src) == ["xx", "yy", "xy"]


def test_out_of_range_index_is_reported(fake_source):
    pool = Pool.parse("abc")
    with pytest.raises(IndexSourceError):
        generate_password(pool, 3, fake_source([3]))
    with pytest.raises(IndexSourceError):
        generate_password(pool, 3, fake_source([-1]))


def test_duplicates_act_as_weights(fake_source):
    pool = Pool.parse("aab")
    src = fake_source([0, 1, 2])
    assert generate_password(pool, 3, src) == "aab"


def test_password_generator_snapshots_pool(fake_source):
    pool = Pool.parse("ab")
    gen = PasswordGenerator(pool, fake_source([1]))
    pool.insert("c")
    pool.remove("b")
    assert gen.generate(3) == "bbb"


def test_password_generator_rejects_empty_pool():
    with pytest.raises(EmptyPoolError):
        PasswordGenerator(Pool())


def test_password_generator_many_and_iter():
    gen = PasswordGenerator(Pool.parse("01"))
    many = gen.generate_many(8, 4)
    assert len(many) == 4 and all(len(p) == 8 for p in many)
    lazy = list(gen.iter_passwords(3, 5))
    assert len(lazy) == 5 and all(set(p) <= {"0", "1"} for p in lazy)


def test_iter_passwords_validates_length():
    gen = PasswordGenerator(Pool.parse("01"))
    with pytest.raises(ValueError):
        next(gen.iter_passwords(-1, 2))


def test_system_source_rejects_non_positive_bound():
    with pytest.raises(ValueError):
        SystemIndexSource().randbelow(0)


def test_default_source_is_shared():
    assert default_source() is default_source()


def test_concurrent_generation_shares_generator():
    gen = PasswordGenerator(Pool.parse("abcdef"))
    results = []
    lock = threading.Lock()

    def worker():
        batch = gen.generate_many(12, 50)
        with lock:
            results.extend(batch)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 200
    assert all(len(p) == 12 and set(p) <= set("abcdef") for p in results)


def test_pool_property_returns_copy():
    gen = PasswordGenerator(Pool.parse("ab"))
    gen.pool.remove_all("ab")
    assert str(gen.pool) == "ab"
    assert list(gen.iter_passwords(0, 2)) == ["", ""]


def test_iter_passwords_rejects_emptied_pool():
    gen = PasswordGenerator(Pool.parse("ab"))
    gen._pool.remove_all("ab")
    with pytest.raises(EmptyPoolError):
        list(gen.iter_passwords(0, 2))
    with pytest.raises(EmptyPoolError):
        list(gen.iter_passwords(3, 1))
