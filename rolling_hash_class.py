"""
polynomial rolling hash used by the Rabin-Karp substring search

hash of c[0..m) = (c[0]*BASE^(m-1) + c[1]*BASE^(m-2) + ... + c[m-1]) % PRIME
BASE: radix, > largest character code of the alphabet (257 covers 8-bit codes 0-255).
PRIME: modulus. Take everything mod PRIME as soon as possible to keep the number < PRIME.
"""

BASE = 257
PRIME = 1000000007


def check_params(base, prime):
    if not isinstance(base, int) or base < 2:
        raise ValueError("base must be an integer >= 2: " + repr(base))
    if not isinstance(prime, int) or prime < 2:
        raise ValueError("prime must be an integer >= 2: " + repr(prime))


def char_code(char):
    '''
    :param char: a 1-char str, or an int when iterating bytes
    :return: integer code of char
    '''
    if isinstance(char, int):
        return char
    return ord(char)


def polyhash(string, base=BASE, prime=PRIME):
    '''
    :return: hash value of input string, computed from scratch
    '''
    hash_value = 0
    for char in string:
        hash_value = (hash_value * base + char_code(char)) % prime
    return hash_value


def leading_power(len_p, base=BASE, prime=PRIME):
    '''
    :param len_p: window length, >= 1
    :return: base^(len_p - 1) % prime, weight of the leading char of a window
    '''
    h = 1
    for i in range(len_p - 1):
        h = (h * base) % prime
    return h


class RollingHash(object):
    """
    hash of a fixed-size window sliding over a sequence
        window: window length, >= 1
        base, prime: hash parameters, see module docstring
    """

    def __init__(self, window, base=BASE, prime=PRIME):
        check_params(base, prime)
        if window < 1:
            raise ValueError("window must be >= 1: " + repr(window))
        self.__window = window
        self.__base = base
        self.__prime = prime
        self.__h = leading_power(window, base, prime)
        self.__fp = 0

    def __len__(self):
        return self.__window

    def get_leading_power(self):
        return self.__h

    def append(self, data):
        """
        feed chars of the first window
        :return: current hash
        """
        for char in data:
            self.__fp = (self.__fp * self.__base + char_code(char)) % self.__prime
        return self.__fp

    def roll(self, out_char, in_char):
        """
        slide the window one position: drop out_char from the front, add in_char at the back
        :return: hash of the new window
        """
        leading = (char_code(out_char) * self.__h) % self.__prime
        # + prime: the difference can be negative
        self.__fp = (self.__fp - leading + self.__prime) % self.__prime
        self.__fp = (self.__fp * self.__base) % self.__prime
        self.__fp = (self.__fp + char_code(in_char)) % self.__prime
        return self.__fp

    def digest(self):
        return self.__fp
