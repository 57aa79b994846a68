"""
Morse Code Player
Turns a message into timed Morse events and drives a tone emitter
and a transcript sink through them
"""

import logging
import time
from collections import namedtuple
from dataclasses import dataclass

from morse_code import DOT, convert_character, lookup

logger = logging.getLogger(__name__)

# Timing constants (in milliseconds)
DOT_LENGTH = 75  # Duration of a dot

# Audio parameters
TONE_FREQUENCY = 1000  # Frequency of the tone in Hz

# Event kinds
DIT = 'dit'
DAH = 'dah'
INTRA_CHARACTER = 'intra_character'
INTER_CHARACTER = 'inter_character'
INTER_WORD = 'inter_word'

TONE_KINDS = (DIT, DAH)

MorseEvent = namedtuple('MorseEvent', ['kind', 'duration', 'label'])


class AudioUnavailableError(Exception):
    """Raised by a tone emitter when no sound can be produced"""


class MorseTiming:
    """Element durations in milliseconds, all multiples of the dot length"""

    def __init__(self, dot_length=DOT_LENGTH):
        if not dot_length or dot_length <= 0:
            raise ValueError(f"dot length must be positive, got {dot_length!r}")
        self.dot_length = dot_length

    @property
    def di(self):
        return 1 * self.dot_length

    @property
    def da(self):
        return 3 * self.dot_length

    @property
    def intra_character(self):
        return 1 * self.dot_length

    @property
    def inter_character(self):
        return 3 * self.dot_length

    @property
    def inter_word(self):
        return 7 * self.dot_length

    def __repr__(self):
        return f"MorseTiming(dot_length={self.dot_length!r})"


@dataclass
class PlaybackOptions:
    """Independent output switches: sound plays tones, verbally writes the transcript"""
    sound: bool = True
    verbally: bool = True


def _mark_events(pattern, timing):
    last = len(pattern) - 1
    for i, mark in enumerate(pattern):
        is_dit = mark == DOT

        label = '-' if i > 0 else ''
        if i < last:
            label += 'di' if is_dit else 'da'
        else:
            label += 'dit' if is_dit else 'dah'

        if is_dit:
            yield MorseEvent(DIT, timing.di, label)
        else:
            yield MorseEvent(DAH, timing.da, label)

        # Gap between marks of a character; none after the last mark
        if i < last:
            yield MorseEvent(INTRA_CHARACTER, timing.intra_character, None)


def sequence(message, timing=None):
    """
    Yield the ordered Morse events for a message.

    Unknown characters are dropped before spacing is decided, so they add
    no gap of their own. Words are spaced by their raw position, so a word
    with no known characters still keeps its inter-word gaps. A trailing
    inter-word gap always closes the message, even when it is empty.
    """
    timing = timing or MorseTiming()
    words = message.split()

    for word_idx, word in enumerate(words):
        patterns = [lookup(char) for char in word]
        patterns = [pattern for pattern in patterns if pattern]

        for pattern_idx, pattern in enumerate(patterns):
            yield from _mark_events(pattern, timing)

            if pattern_idx < len(patterns) - 1:
                yield MorseEvent(INTER_CHARACTER, timing.inter_character, ' ')

        if word_idx < len(words) - 1:
            yield MorseEvent(INTER_WORD, timing.inter_word, ' ')

    yield MorseEvent(INTER_WORD, timing.inter_word, None)


class MorsePlayer:
    """
    Plays messages as Morse code.

    tone_emitter needs emit(frequency, duration_ms) and transcript needs
    append(text). Either may be None, in which case the matching option has
    no effect. sleep takes seconds and is used for every silent interval.
    Options may be changed between calls to play(), not during one.
    """

    def __init__(self, options=None, timing=None, tone_emitter=None,
                 transcript=None, sleep=None, frequency=TONE_FREQUENCY):
        if frequency <= 0:
            raise ValueError(f"frequency must be positive, got {frequency!r}")
        self.options = options if options is not None else PlaybackOptions()
        self.timing = timing or MorseTiming()
        self.tone_emitter = tone_emitter
        self.transcript = transcript
        self.frequency = frequency
        self._sleep = sleep or time.sleep

    def convert_character(self, character):
        return convert_character(character)

    def duration(self, message):
        """Total time in milliseconds that play(message) takes"""
        return sum(event.duration for event in sequence(message, self.timing))

    def play(self, message):
        """Play a message and return once its trailing gap has elapsed"""
        logger.debug("Playing %r with %s, %r", message, self.options, self.timing)

        sound = self.options.sound and self.tone_emitter is not None
        verbally = self.options.verbally and self.transcript is not None

        for event in sequence(message, self.timing):
            if verbally and event.label:
                verbally = self._write(event.label)

            if sound and event.kind in TONE_KINDS:
                sound = self._tone(event.duration)
            else:
                self._wait(event.duration)

    def _write(self, text):
        try:
            self.transcript.append(text)
        except Exception:
            logger.warning("Transcript failed, continuing without it", exc_info=True)
            return False
        return True

    def _tone(self, duration):
        try:
            self.tone_emitter.emit(self.frequency, duration)
        except AudioUnavailableError as e:
            logger.warning("Sound unavailable, continuing silently: %s", e)
            self._wait(duration)
            return False
        return True

    def _wait(self, duration):
        self._sleep(duration / 1000)
