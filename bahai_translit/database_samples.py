"""Sample prayers from the writings database, used to compare transliterations."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Iterable, Sequence
from dataclasses import asdict, dataclass, replace
from os import PathLike
from pathlib import Path
from typing import TextIO

from .dictionary import DictionaryError
from .script import Language
from .transliterator import Transliterator

DEFAULT_OUTPUT = "database_test_results.json"


@dataclass(frozen=True)
class DatabaseTestCase:
    """A database text, its stored transliteration and the result of re-transliterating it."""

    source_id: str
    language: str
    original: str
    current_translit: str
    new_translit: str = ""
    improved: bool = False


_PERSIAN = (
    (
        "1544",
        "هُواللّه\nای يزدانِ مهربان، سرا پا گُنَهيم و خاکِ رَهيم و مُتِضَرّع در هر صبحگهيم، ای بزرگوار، خطا بپوش و عطا ببخش، وفا بفرما، صفا عنايت کن تا نورِ هدايت تابد و پرتوِ موهبت بيفزايد، شمعِ غفران بر افروزد و پردۀ عِصيان بسوزد، صبحِ اميد دَمَد، ظلمتِ نوميد زائل گردد، نسيمِ الطاف بِوَزَد و شميمِ اِحسان مُرور نمايد، مشام\u200cها مُعَطّر گردد، روي\u200cها مُنَوّر شود. توئی  بخشنده و مهربان و درخشنده و تابان.",
        "Húvállh ay yzdáni mhrbán, sra pa gúnáhym va kháki ráhym va mútídár dár hr sbhghym, ay bzrgvár, khta bpvsh va tá bbkhsh, vfa bfrma, sfa náyt kun tá nvri hdáyt tábd va prtvi mvhbt byfzáyd, shmi ghfrán br afrvzd va prd isyán bsvzd, sbhi amyd dámád, zlmti nvmyd záíl grdd, nsymi altáf bívázád va shmymi aíhsán múrvr nmáyd, mshámha múátr grdd, rvyha múnávr shvd. Tví bkhshndh va mhrbán va drkhshndh va tábán.",
    ),
    (
        "1543",
        "هُوالابهی\nای خداوندِ مهربان، اين اسيرانِ زنجير مَحبّتت را دستگير شو و مَلجأ و پناه و مُجير، نَفَحاتِ قُدس از گُلشنِ عنايت بفرست و ساحتِ دل\u200cها را گُلستانِ موهبت کن و چمنستانِ حقيقت نما، از غيرِ خود بي\u200cزار کن و به راز و نياز دَمساز فرما، مورِ حَقير را سُليمانِ اِقليمِ جليل کن و ذَرّۀ فقير را اميرِ اوجِ اثير فرما، قطره را موهبتِ بحر بخش و سبزه را طراوت و لطافتِ شجرۀ اَخضَر عطا فـرمـا، کُل  يارانِ تـو انـد و بندگانِ درگاهِ تو، فضل وَ  جود مبذول دار و در اين يومِ مسعود تأييدِ مخصوص مشهود کن. توئی بخشنده و مهربان و درخشنده  و تابان.",
        "Húvúl-Abhá ay khúdávándi mhrbán, ín asyráni znjyr máhbtt rá dstgyr shv va málja va pnáh va mújyr, náfáháti qúds az gúlshni náyt bfrst va sáhti dlha rá gúlstáni mvhbt kun va chmnstáni hqyqt nma, az ghyri khvd byzár kun va bíh ráz va nyáz dámsáz farmá, mvri háqyr rá súlymáni aíqlymi jlyl kun va dhár fqyr rá amyri avji athyr farmá, qtrh rá mvhbti bhr bkhsh va sbzh rá trávt va ltáfti shjr ákhdár tá farmá, kúl yáráni tv and va bndgáni drgáhi tv, fdl va jvd mbdhvl dár va dár ín yvmi msvd táyydi mkhsvs mshhvd kun. Tví bkhshndh va mhrbán va drkhshndh va tábán.",
    ),
    (
        "1395",
        "هُواللّه\nای پروردگار، به جنودِ مَلأ اَعلی نصرت نما و به جيوشِ ملائکه محبّت و صفا اعانت کن نَغَماتِ قدس بفرست و مَحافِلِ اُنس مُعطّر نما، فيضِ قديم مَبذول دار و فوزِ عظيم شايان نما، نورِ حقيقت جلوه ده ديدۀ اهلِ بَصيرت روشن کن، آهنگِ مَلکوت ابهی به\u200cگوش رسان و هر دلتنگِ عالمِ اَدنی را خوشوقت کن، ابرِ رحمت بفرست، بارانِ مُوهبت بِبار، چمنِ هدايت بيارا، رياحينِ مَعانی اَنبات کن و سُلطانِ گُل را تاجِ موهبت بر سر نه و بلبلانِ روحانی را به غزلخوانی بخوان و حقايق و معانی تعليم ده. توئی پروردگار توئی کردگار توئی  مجلّی طُور در کشورِ انوار.",
        "Húvállh ay Párvárdígár, bíh jnvdi mála ály nsrt nma va bíh jývshi mláíkh maḥabbat va sfa ánt kun nághámáti qds bfrst va máháfíli aúns mútr nma, fydi qdym mábdhvl dár va fvzi zym sháyán nma, nvri hqyqt jlvh dh dyd ahli básyrt rvshn kun, ahngi málkvt abhy bhgvsh rsán va hr dltngi almi ádny rá khvshvqt kun, abri rhmt bfrst, báráni múvhbt bíbár, chmni hdáyt byára, ryáhyni mány ánbát kun va súltáni gúl rá táji mvhbt br sr nh va blbláni rvhány rá bíh ghzlkhvány bkhván va hqáyq va mány tlym dh. Tví Párvárdígár tví krdgár tví mjly túvr dár kshvri anvár.",
    ),
    (
        "1496",
        "هواللّه\nخدایا، طفلم در ظلِ عنایتت پرورش ده. نهالِ تازه\u200cام به رشحاتِ سحابِ عنایت پرورش فرما. گیاهِ حدیقۀ مَحبتم، درختِ بارور کن. تـوئی مقتدر و توانا و تـوئی مهـربان و دانا و بینا.",
        "Hvállh khdáya, tflm dár zli náytt prvrsh dh. Nháli tázhám bíh rshháti shábi náyt prvrsh farmá. Gyáhi hdyq máhbtm, drkhti bárvr kun. Tví mqtdr va tvána va tví mhrbán va dána va byna.",
    ),
    (
        "1381",
        "پاكا پادشاها\nهر آگاهی بر يكتائيت گُواهی داده. توئی آن توانائی كه جودت وجود را موجود فرمود و خطای عباد عطايت را باز نداشت. ای كريم از مَطلعِ نورت مُنَوَّر نما و از مشرقِ غَنايت ثروت حقيقی بخش. توئی بخشنده و توانا.",
        "Páka pádsháha hr agáhy br yktáít gúváhy dádh. Tví án tvánáí kh jvdt vjvd rá mvjvd frmvd va khtáy bád táyt rá báz ndásht. Ay krym az mátli nvrt múnávár nma va az mshrqi ghánáyt thrvt hqyqy bkhsh. Tví bkhshndh va tvána.",
    ),
)

_ARABIC = (
    (
        "3266",
        "يا إِلهِي اسْمُكَ شِفائِي وَذِكْرُكَ دَوائِي وَقُرْبُكَ رَجَائِيْ وَحُبُّكَ مُؤْنِسِيْ وَرَحْمَتُكَ طَبِيبِيْ وَمُعِيْنِيْ فِي الدُّنْيا وَالآخِرَةِ وَإِنَّكَ أَنْتَ المُعْطِ العَلِيمُ الحَكِيمُ.",
        "Ya Iláhí asmuka shifaií vadhikruka davaií vaqurbuka rajáií vahubuka múnisí varahmatuka tabíbí vamuíní fí aldunya válakhirahi vaiinaka ánta almuti alalímu alhakímu.",
    ),
    (
        "3287",
        "# بِسْمِهِ المُهَيْمِنِ عَلَى الأَسْماءِ\nقُلْ إِلهِي إِلهِي، فَرِّجْ هَمِّي بِجُودِكَ وعَطَائِكَ، وأَزِلْ كُرْبَتِي بِسَلْطَنَتِكَ واقْتِدَارِكَ. تَرانِي يا إِلهِي مُقْبِلاً إِليكَ حينَ إِذْ أَحاطَتْ بِيَ الأَحْزَانُ مِنْ كُلِّ الجِّهَاتِ. أَسأَلُكَ يا مَالِكَ الوُجُودِ والمُهَيْمِنَ على الغَيْبِ والشُّهُودِ، باسْمِكَ الَّذي بِهِ سَخَّرْتَ الأَفْئِدَةَ والقُلُوبَ وبِأَمْواجِ بَحْرِ رَحْمَتِكَ وإِشْراقاتِ أَنْوارِ نيِّرِ عَطَائِكَ أَنْ تَجْعَلَنِي مِنَ الَّذينَ ما مَنَعَهُم شَيْءٌ مِنَ الأَشْياءِ عَنْ التَّوجُّهِ إِلَيْكَ يا مَوْلَى الأَسْماءِ وَفاطِرَ السَّماءِ، أَيْ رَبِّ تَرَى ما وَرَدَ عَلَيَّ فِي أَيَّامِكَ، أَسأَلُكَ بِمَشْرِقِ أَسْمَائِكَ ومَطْلِعِ صِفَاتِكَ أنْ تُقَدَّرَ لِي ما يَجْعَلُنِي قَائِمًا على خِدْمَتِكَ وَناطِقًا بِثَنَائِكَ. إِنَّكَ أَنْتَ المُقْتَدِرُ القَدِيرُ وبِالإِجَابَةِ جَدِيرٌ. ثُمَّ أَسْأَلُكَ في آخِرِ عَرْضِي بِأنْوارِ وَجْهِكَ أَنْ تُصْلِحَ أُمُورِي وتَقْضِي دَيْنِي وَحَوائِجِي إِنَّكَ أَنْتَ الّذي شَهِدَ كُلُّ ذِي لِسَانٍ بقُدْرَتِكَ وقُوَّتِكَ، وذِي دِرَايَةٍ بِعَظَمَتِكَ وسُلْطانِكَ. لا إِلهَ إِلاَّ أَنْتَ السَّامِعُ المُجِيبُ.",
        "# Bismihi almuhaymini alá alásmai\nqul Iláhí Iláhí, farij hamí bijuvdika vatáiika, vázil kurbatí bisaltanatika vaqtidárika. Taraní ya Iláhí muqbilán iilyka hyna iidh áhatat biya aláhzánu min kuli aljiháti. ásáluka ya málika alvujuvdi valmuhaymina la alghaybi valshuhuvdi, basmika aladhy bihi sakharta aláfiidaha valquluvba vbiámvaji bahri rahmatika viishraqati ánvari nyiri atáiika án tajalaní mina aladhyna má manáhum shayun mina aláshyai an altavjuhi iilayka ya mavlá alásmai vafatira alsamai, áy Rabbí tará má varada alaya fí áyámika, ásáluka bimashriqi ásmáiika vmatlii sifátika an tuqadara lí má yajaluní qáiimana la khidmatika vanatiqana bithanáiika. Iinaka ánta almuqtadiru alqadíru vbialiijábahi jadírun. Thuma ásáluka fy akhiri ardí bianvari vajhika án tusliha aumuvrí vtaqdí dayní vahavaiijí iinaka ánta aldhy shahida kulu dhí lisánin bqudratika vquvatika, vdhí diráyahin biazamatika vsultanika. La iilha iilá ánta alsámiu almujíbu.",
    ),
)

_LANGUAGE_NAMES = {Language.ARABIC: "Arabic", Language.PERSIAN: "Persian"}


def persian_samples() -> list[DatabaseTestCase]:
    """Return the Persian sample texts with their stored transliterations."""
    return [DatabaseTestCase(sid, "fa", original, current) for sid, original, current in _PERSIAN]


def arabic_samples() -> list[DatabaseTestCase]:
    """Return the Arabic sample texts with their stored transliterations."""
    return [DatabaseTestCase(sid, "ar", original, current) for sid, original, current in _ARABIC]


def evaluate_samples(
    transliterator: Transliterator,
    samples: Iterable[DatabaseTestCase],
    lang: Language,
    out: TextIO | None = None,
) -> list[DatabaseTestCase]:
    """Re-transliterate every sample, report each result and return the updated samples."""
    out = out if out is not None else sys.stdout
    name = _LANGUAGE_NAMES[lang]
    results = []
    for number, sample in enumerate(samples, start=1):
        print(f"\n--- {name} Sample {number} (Source ID: {sample.source_id}) ---", file=out)
        print(f"Original:\n{sample.original}", file=out)
        print(f"Current Translit:\n{sample.current_translit}", file=out)
        new_translit = transliterator.transliterate(sample.original, lang)
        print(f"New Translit:\n{new_translit}", file=out)
        improved = bool(new_translit) and new_translit != sample.current_translit
        if improved:
            print("*** IMPROVED: New transliteration differs from current", file=out)
        else:
            print("*** SAME: No significant improvement", file=out)
        results.append(replace(sample, new_translit=new_translit, improved=improved))
    return results


def save_results(
    path: str | PathLike[str],
    persian: Sequence[DatabaseTestCase],
    arabic: Sequence[DatabaseTestCase],
) -> None:
    """Write both sample sets to ``path`` as indented JSON."""
    results = {
        "arabic_samples": [asdict(sample) for sample in arabic],
        "persian_samples": [asdict(sample) for sample in persian],
    }
    Path(path).write_text(json.dumps(results, indent=2, ensure_ascii=False), encoding="utf-8")


def run_database_tests(
    transliterator: Transliterator,
    output_path: str | PathLike[str] = DEFAULT_OUTPUT,
    out: TextIO | None = None,
) -> tuple[list[DatabaseTestCase], list[DatabaseTestCase]]:
    """Evaluate all samples, save them to ``output_path`` and print a summary."""
    out = out if out is not None else sys.stdout
    print("Bahai Transliterator Database Test", file=out)
    print("==================================", file=out)

    print("=== Testing Persian Samples ===", file=out)
    persian = evaluate_samples(transliterator, persian_samples(), Language.PERSIAN, out)
    print("\n=== Testing Arabic Samples ===", file=out)
    arabic = evaluate_samples(transliterator, arabic_samples(), Language.ARABIC, out)

    try:
        save_results(output_path, persian, arabic)
    except OSError as exc:
        print(f"Error writing JSON file: {exc}", file=out)
    else:
        print(f"\nResults saved to {output_path}", file=out)

    persian_improved = sum(sample.improved for sample in persian)
    arabic_improved = sum(sample.improved for sample in arabic)
    print("\n=== SUMMARY ===", file=out)
    print(f"Persian: {persian_improved}/{len(persian)} samples improved", file=out)
    print(f"Arabic: {arabic_improved}/{len(arabic)} samples improved", file=out)
    print(
        f"Total: {persian_improved + arabic_improved}/{len(persian) + len(arabic)} samples improved",
        file=out,
    )
    return persian, arabic


def main(argv: Sequence[str] | None = None) -> int:
    """Run the database sample comparison from the command line."""
    parser = argparse.ArgumentParser(description="Compare transliterations of database samples.")
    parser.add_argument("--data-dir", default="data", help="directory holding the dictionaries")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="JSON file for the results")
    args = parser.parse_args(argv)
    try:
        transliterator = Transliterator.from_directory(args.data_dir)
    except DictionaryError as exc:
        print(f"Error initializing transliterator: {exc}")
        return 1
    run_database_tests(transliterator, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())