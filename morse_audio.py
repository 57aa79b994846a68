"""
Morse Code Audio
Tone emitters and transcript sinks for MorsePlayer, built on pydub
"""

import logging
import sys

from pydub import AudioSegment, playback
from pydub.generators import Sine

from morse_player import TONE_FREQUENCY, AudioUnavailableError

logger = logging.getLogger(__name__)

# Audio parameters
SAMPLE_RATE = 44100  # Sample rate for audio


def generate_tone(duration, frequency=TONE_FREQUENCY):
    """Generate a sine wave tone"""
    return Sine(frequency, sample_rate=SAMPLE_RATE).to_audio_segment(duration=duration)


def generate_silence(duration):
    """Generate silence"""
    return AudioSegment.silent(duration=duration, frame_rate=SAMPLE_RATE)


class SpeakerToneEmitter:
    """Plays each tone through the default audio output and blocks until it ends"""

    def emit(self, frequency, duration):
        tone = generate_tone(duration, frequency)
        try:
            playback.play(tone)
        except Exception as e:
            # pydub falls back to ffplay when no audio module is installed
            raise AudioUnavailableError(f"cannot play audio: {e}") from e


class AudioRecorder:
    """
    Records a performance into an AudioSegment instead of playing it.

    Pass the recorder as the tone emitter and its silence method as the
    player's sleep; nothing blocks and the result is in the audio attribute.
    """

    def __init__(self):
        self.audio = AudioSegment.empty()

    def emit(self, frequency, duration):
        self.audio += generate_tone(duration, frequency)

    def silence(self, seconds):
        self.audio += generate_silence(seconds * 1000)


class StreamTranscript:
    """Writes transcript labels to a text stream as they arrive"""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def append(self, text):
        self.stream.write(text)
        self.stream.flush()
