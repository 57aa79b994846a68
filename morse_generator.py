#!/usr/bin/env python3
"""
Morse Code Generator
Plays text as Morse code, or saves the Morse audio as an MP3 or WAV file
"""

import argparse
import logging
import sys

from morse_audio import AudioRecorder, SpeakerToneEmitter, StreamTranscript
from morse_code import text_to_morse
from morse_player import DOT_LENGTH, TONE_FREQUENCY, MorsePlayer, MorseTiming, PlaybackOptions

logger = logging.getLogger(__name__)


def render_morse_audio(text, timing=None, frequency=TONE_FREQUENCY):
    """Render text to a Morse code AudioSegment without playing it"""
    recorder = AudioRecorder()
    player = MorsePlayer(
        PlaybackOptions(sound=True, verbally=False),
        timing=timing,
        tone_emitter=recorder,
        sleep=recorder.silence,
        frequency=frequency,
    )
    player.play(text)
    return recorder.audio


def save_morse_audio(text, output_file, timing=None, frequency=TONE_FREQUENCY):
    """Convert text to Morse code audio and save as MP3 or WAV"""
    print(f"Converting text to Morse code: '{text}'")
    print(f"Morse code: {text_to_morse(text)}")

    print("Generating audio...")
    audio = render_morse_audio(text, timing, frequency)

    # Determine format from extension
    if output_file.endswith('.wav'):
        audio_format = "wav"
    else:
        audio_format = "mp3"

    print(f"Saving to {output_file}...")
    audio.export(output_file, format=audio_format)
    print(f"Successfully created {output_file}")


def play_morse(text, options, timing=None, frequency=TONE_FREQUENCY):
    """Play text through the speakers and write the transcript to the console"""
    player = MorsePlayer(
        options,
        timing=timing,
        tone_emitter=SpeakerToneEmitter(),
        transcript=StreamTranscript(),
        frequency=frequency,
    )
    print(f"Morse code: {text_to_morse(text)}")
    player.play(text)
    if options.verbally:
        print()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play or save text as Morse code")
    parser.add_argument("text", nargs="*", help="Text to convert")
    parser.add_argument("-o", "--output", help="Save audio to this .mp3 or .wav file instead of playing")
    parser.add_argument("--dot", type=int, default=DOT_LENGTH, help="Dot length in ms")
    parser.add_argument("--frequency", type=int, default=TONE_FREQUENCY, help="Tone frequency in Hz")
    parser.add_argument("--silent", action="store_true", help="Do not play sound, only keep the timing")
    parser.add_argument("--quiet", action="store_true", help="Do not write the dit/dah transcript")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    """Main console application"""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    print("=" * 50)
    print("Morse Code Generator")
    print("=" * 50)

    # Get text input
    if args.text:
        text = ' '.join(args.text)
    else:
        text = input("Enter text to convert to Morse code: ")

    if not text.strip():
        print("Error: No text provided")
        sys.exit(1)

    try:
        timing = MorseTiming(args.dot)

        if args.output:
            output_file = args.output
            # Ensure proper audio extension
            if not output_file.endswith('.mp3') and not output_file.endswith('.wav'):
                output_file += '.mp3'
            save_morse_audio(text, output_file, timing, args.frequency)
        else:
            options = PlaybackOptions(sound=not args.silent, verbally=not args.quiet)
            play_morse(text, options, timing, args.frequency)
    except Exception as e:
        logger.debug("Generation failed", exc_info=True)
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
