# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import pytest

# -----------------------------------------------------------
# Synthetic snapshot of the ucd-files
# -----------------------------------------------------------

UNICODE_DATA = '''\
0000;<control>;Cc;0;BN;;;;;N;NULL;;;;
000D;<control>;Cc;0;B;;;;;N;CARRIAGE RETURN (CR);;;;
0041;LATIN CAPITAL LETTER A;Lu;0;L;;;;;N;;;;0061;
0042;LATIN CAPITAL LETTER B;Lu;0;L;;;;;N;;;;0062;
0043;LATIN CAPITAL LETTER C;Lu;0;L;;;;;N;;;;0063;
0061;LATIN SMALL LETTER A;Ll;0;L;;;;;N;;;0041;;0041
0062;LATIN SMALL LETTER B;Ll;0;L;;;;;N;;;0042;;0042
0063;LATIN SMALL LETTER C;Ll;0;L;;;;;N;;;0043;;0043
00A0;NO-BREAK SPACE;Zs;0;CS;<noBreak> 0020;;;;N;NON-BREAKING SPACE;;;;
00AA;FEMININE ORDINAL INDICATOR;Lo;0;L;<super> 0061;;;;N;;;;;
00AD;SOFT HYPHEN;Mn;0;BN;;;;;N;;;;;
00C0;LATIN CAPITAL LETTER A WITH GRAVE;Lu;0;L;0041 0300;;;;N;LATIN CAPITAL LETTER A GRAVE;;;00E0;
0028;LEFT PARENTHESIS;Ps;0;ON;;;;;Y;OPENING PARENTHESIS;;;;
0031;DIGIT ONE;Nd;0;EN;;1;1;1;N;;;;;
0300;COMBINING GRAVE ACCENT;Mn;230;NSM;;;;;N;NON-SPACING GRAVE;;;;
0903;DEVANAGARI SIGN VISARGA;Mc;0;L;;;;;N;;;;;
0958;DEVANAGARI LETTER QA;Lo;0;L;0915 093C;;;;N;;;;;
200B;ZERO WIDTH SPACE;Cf;0;BN;;;;;N;;;;;
200D;ZERO WIDTH JOINER;Cf;0;BN;;;;;N;;;;;
4E00;<CJK Ideograph, First>;Lo;0;L;;;;;N;;;;;
9FFF;<CJK Ideograph, Last>;Lo;0;L;;;;;N;;;;;
1D400;MATHEMATICAL BOLD CAPITAL A;Lu;0;L;<font> 0041;;;;N;;;;;
'''

DERIVED_CORE_PROPERTIES = '''\
# DerivedCoreProperties-16.0.0.txt

0041..005A    ; Uppercase # L&  [26] LATIN CAPITAL LETTER A..LATIN CAPITAL LETTER Z
00C0          ; Uppercase # L&       LATIN CAPITAL LETTER A WITH GRAVE
1D400         ; Uppercase # L&       MATHEMATICAL BOLD CAPITAL A
0061..007A    ; Lowercase # L&  [26] LATIN SMALL LETTER A..LATIN SMALL LETTER Z
00AA          ; Lowercase # Lo       FEMININE ORDINAL INDICATOR
0041..005A    ; Alphabetic # L&  [26] LATIN CAPITAL LETTER A..LATIN CAPITAL LETTER Z
'''

EAST_ASIAN_WIDTH = '''\
# EastAsianWidth-16.0.0.txt
# @missing: 0000..10FFFF; N

0020..007E     ; Na # [95] SPACE..TILDE
00A0           ; N  # Zs         NO-BREAK SPACE
00AA           ; A  # Lo         FEMININE ORDINAL INDICATOR
00AD           ; A  # Cf         SOFT HYPHEN
00C0           ; N  # Lu         LATIN CAPITAL LETTER A WITH GRAVE
0903           ; W  # Mc         DEVANAGARI SIGN VISARGA
200B           ; W  # Cf         ZERO WIDTH SPACE
4E00..9FFF     ; W  # Lo [20992] CJK UNIFIED IDEOGRAPH-4E00..CJK UNIFIED IDEOGRAPH-9FFF
'''

GRAPHEME_BREAK_PROPERTY = '''\
# GraphemeBreakProperty-16.0.0.txt

000D          ; CR # Cc       <control-000D>
0300..036F    ; Extend # Mn [112] COMBINING GRAVE ACCENT..COMBINING LATIN SMALL LETTER X
0903          ; SpacingMark # Mc       DEVANAGARI SIGN VISARGA
200D          ; ZWJ # Cf       ZERO WIDTH JOINER
1F1E6..1F1FF  ; Regional_Indicator # So  [26] REGIONAL INDICATOR SYMBOL LETTER A..REGIONAL INDICATOR SYMBOL LETTER Z
'''

EMOJI_DATA = '''\
# emoji-data-16.0.0.txt

0023          ; Emoji                # E0.0   [1] (#)       hash sign
00A9          ; Extended_Pictographic# E0.6   [1] (©)       copyright
1F1E6..1F1FF  ; Emoji_Component      # E0.0  [26] (🇦..🇿)    regional indicator symbol letter a..regional indicator symbol letter z
1F600..1F64F  ; Extended_Pictographic# E0.6  [80] (😀..🙏)    grinning face..folded hands
'''

COMPOSITION_EXCLUSIONS = '''\
# CompositionExclusions-16.0.0.txt

0958    #  DEVANAGARI LETTER QA
0959    #  DEVANAGARI LETTER KHHA
2ADC    #  FORKING
'''

CASE_FOLDING = '''\
# CaseFolding-16.0.0.txt

0041; C; 0061; # LATIN CAPITAL LETTER A
0042; C; 0062; # LATIN CAPITAL LETTER B
0043; C; 0063; # LATIN CAPITAL LETTER C
00DF; F; 0073 0073; # LATIN SMALL LETTER SHARP S
0130; T; 0069; # LATIN CAPITAL LETTER I WITH DOT ABOVE
1E9E; F; 0073 0073; # LATIN CAPITAL LETTER SHARP S
1E9E; S; 00DF; # LATIN CAPITAL LETTER SHARP S
'''

@pytest.fixture
def sources():
	return {
		'UnicodeData': UNICODE_DATA,
		'DerivedCoreProperties': DERIVED_CORE_PROPERTIES,
		'EastAsianWidth': EAST_ASIAN_WIDTH,
		'GraphemeBreakProperty': GRAPHEME_BREAK_PROPERTY,
		'EmojiData': EMOJI_DATA,
		'CompositionExclusions': COMPOSITION_EXCLUSIONS,
		'CaseFolding': CASE_FOLDING
	}

@pytest.fixture
def sourceFiles(tmp_path, sources):
	# write the snapshot out as if it had been downloaded
	dirPath = tmp_path / 'ucd'
	dirPath.mkdir()
	mapping = {}
	for name, content in sources.items():
		path = dirPath / f'{name}.txt'
		path.write_text(content, encoding='utf-8')
		mapping[name] = str(path)
	return mapping
