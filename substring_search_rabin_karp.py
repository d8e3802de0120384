"""
substring search using Rabin-Karp algorithm
text: document to be searched
pattern: keyword. if len(pattern) is 0 or len(pattern) > len(text), there is nothing to find and no hash is computed.
base, prime: see rolling_hash_class. Every hash hit is verified char by char, so a collision
      (spurious hit) costs time but never produces a wrong index.
"""
import logging

from rolling_hash_class import BASE, PRIME, RollingHash, check_params, polyhash

logger = logging.getLogger(__name__)

BYTES_TYPES = (bytes, bytearray, memoryview)

# sample runs printed by main(): (title, text, pattern)
DEMO_CASES = [
    ("Short String", "abracadabra", "abra"),
    ("Medium String", "thequickbrownfoxjumpsoverthelazydog", "fox"),
    ("Longer String", "GCATCGCAGAGAGTATACAGTACG", "GCAG"),
    ("No Match", "hello world", "goodbye"),
]


def check_inputs(text, pattern):
    if text is None or pattern is None:
        raise TypeError("text and pattern must be sequences, not None")
    if (isinstance(text, str) and isinstance(pattern, BYTES_TYPES)) or \
            (isinstance(pattern, str) and isinstance(text, BYTES_TYPES)):
        raise TypeError("cannot search for %s in %s" % (type(pattern).__name__, type(text).__name__))


def window_hashes(text, len_p, base=BASE, prime=PRIME):
    '''
    :param len_p: window length
    :return: generator of hash values for each substring of len_p, in order of start index
    '''
    len_t = len(text)
    if len_p == 0 or len_p > len_t:
        return
    rolling = RollingHash(len_p, base, prime)
    yield rolling.append(text[i] for i in range(len_p))
    for i in range(len_t - len_p):
        yield rolling.roll(text[i], text[i + len_p])


def search(text, pattern, base=BASE, prime=PRIME):
    '''
    :param text: str, bytes, or any sequence of chars / ints
    :param pattern: same kind of sequence as text
    :return: 0-indexed start of every occurrence of pattern in text, ascending, overlaps included
    '''
    check_inputs(text, pattern)
    len_p = len(pattern)
    len_t = len(text)
    indices = []

    if len_p == 0 or len_p > len_t:
        check_params(base, prime)
        return indices

    # RollingHash checks base and prime
    rolling = RollingHash(len_p, base, prime)
    hash_pattern = polyhash(pattern, base, prime)
    hash_text = rolling.append(text[i] for i in range(len_p))

    spurious = 0
    for i in range(len_t - len_p + 1):
        if hash_pattern == hash_text:
            match = True
            for j in range(len_p):
                if text[i + j] != pattern[j]:
                    match = False
                    break
            if match:
                indices.append(i)
            else:
                spurious += 1
                logger.debug("spurious hit at %d", i)

        # no next window after the last one
        if i < len_t - len_p:
            hash_text = rolling.roll(text[i], text[i + len_p])

    logger.debug("searched %d chars for %d-char pattern: %d matches, %d spurious hits",
                 len_t, len_p, len(indices), spurious)
    return indices


def count_occurrences(text, pattern, base=BASE, prime=PRIME):
    return len(search(text, pattern, base, prime))


def main():
    print("--- Rabin-Karp Algorithm Test Cases ---")
    for n, (title, text, pattern) in enumerate(DEMO_CASES, 1):
        print()
        print("Test %d: %s" % (n, title))
        print('Text:    "%s"' % text)
        print('Pattern: "%s"' % pattern)
        print("Found at indices:", search(text, pattern))


if __name__ == '__main__':
    main()
