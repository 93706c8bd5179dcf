"""
Tail probability approximants.

Same segment layout as the density tables. PLUS_* give the upper-tail mass,
MINUS_* the lower-tail mass.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from pysatl_mapairy.approximation.pade import PadeTable


PLUS_0_1 = PadeTable(
    numer=(
        3.33333333333333333333e-1,
        7.49532137610545010591e-2,
        9.25326921848155048716e-3,
        6.59133092365796208900e-3,
        -5.21942678326323374113e-4,
        8.22766804917461941348e-5,
        -3.97941251650023182117e-6,
    ),
    denom=(
        1.00000000000000000000e0,
        8.17408156824742736411e-1,
        3.57041011418415988268e-1,
        1.04580353775369716002e-1,
        1.87521616934129432292e-2,
        2.33232161135637085535e-3,
        7.31285352607895467310e-5,
    ),
)


PLUS_1_2 = PadeTable(
    numer=(
        1.84196970581015939888e-1,
        -1.19398028299089933853e-3,
        1.21954054797949597854e-2,
        -9.37912675685073154845e-4,
        1.66651954077980453212e-4,
        -1.33271812303025233648e-5,
        5.35982226125013888796e-7,
    ),
    denom=(
        1.00000000000000000000e0,
        5.70352826101668448273e-1,
        1.98852010141232271304e-1,
        3.64864882318453496161e-2,
        4.22173125405065522298e-3,
        1.20079284386796600356e-4,
    ),
)


PLUS_2_4 = PadeTable(
    numer=(
        1.07409273397524124098e-1,
        3.83900318969331880402e-2,
        1.17926652359826576790e-2,
        1.52181625871479030046e-3,
        1.50703424417132565662e-4,
        2.10117959279448106308e-6,
        1.97360985832285866640e-8,
        -1.06076300080048408251e-9,
    ),
    denom=(
        1.00000000000000000000e0,
        8.54435380513870673497e-1,
        3.66021233157880878411e-1,
        9.42985570806905160687e-2,
        1.54122343653998564507e-2,
        1.49849056258932455548e-3,
        6.94290406268856211707e-5,
    ),
)


PLUS_4_8 = PadeTable(
    numer=(
        4.70720199535228802538e-2,
        2.67200763833749070079e-2,
        7.37400551855064729769e-3,
        1.10592441765001623699e-3,
        9.15846028547400212588e-5,
        3.17801522553862136789e-6,
        2.03102753319827713542e-8,
        -5.16172854149066643529e-11,
    ),
    denom=(
        1.00000000000000000000e0,
        9.05317644829451086870e-1,
        3.73713496637025562492e-1,
        8.94434672792094976627e-2,
        1.31846542255347106087e-2,
        1.16680596342421447100e-3,
        5.44719256441278863300e-5,
        8.73131209154185067287e-7,
    ),
)


PLUS_8_16 = PadeTable(
    numer=(
        1.74847564444513000450e-2,
        6.00209162595027323742e-3,
        7.86550260761375576075e-4,
        4.46682547335758521734e-5,
        9.51329761417139273391e-7,
        4.10313065114362712333e-9,
        -9.81286503831545640189e-12,
        2.98763969872672156104e-14,
    ),
    denom=(
        1.00000000000000000000e0,
        5.27732094554221674504e-1,
        1.14330643482604301178e-1,
        1.27722341942374066265e-2,
        7.54563340152441778517e-4,
        2.13377039814057925832e-5,
        2.09670987094350618690e-7,
    ),
)


PLUS_16_32 = PadeTable(
    numer=(
        6.22684103170563193015e-3,
        1.34714356588780958096e-3,
        9.51289465377874891896e-5,
        2.64918464474843134081e-6,
        2.66703857491046795285e-8,
        5.42037888457985833156e-11,
        -6.18017115447736427379e-14,
        9.11626234402148561268e-17,
    ),
    denom=(
        1.00000000000000000000e0,
        3.09895694991285975774e-1,
        3.69874670435930773471e-2,
        2.15708854325146400153e-3,
        6.35345408451056881884e-5,
        8.65722805575670770555e-7,
        4.03153189557220023202e-9,
    ),
)


PLUS_32_64 = PadeTable(
    numer=(
        2.20357145727036120652e-3,
        1.45412555771401325111e-4,
        3.27819006009093198652e-6,
        2.96786786716623870006e-8,
        9.54192199129339742308e-11,
        5.71421706870777687254e-14,
        -1.48321866072033823195e-17,
    ),
    denom=(
        1.00000000000000000000e0,
        1.12851983233980279746e-1,
        4.94650928817638043712e-3,
        1.05447405092956497114e-4,
        1.11578464291338271178e-6,
        5.27522295397347842625e-9,
        7.95786524903707645399e-12,
    ),
)


PLUS_LIMIT = PadeTable(
    numer=(
        3.98942280401432677940e-1,
        2.89752186412133782995e-2,
        4.67360459917040710474e0,
        -1.26770824563800250704e-1,
    ),
    denom=(
        1.00000000000000000000e0,
        7.26301023103568827709e-2,
        1.60899894281099149848e1,
    ),
)


MINUS_1_0 = PadeTable(
    numer=(
        4.23238998449671083670e-1,
        4.95353582976475183891e-1,
        2.45823281826037784270e-1,
        7.29726507468813920788e-2,
        1.63332856186819713346e-2,
        2.82514634871307516142e-3,
        2.66220579589280704089e-4,
        3.09442180091323751049e-6,
    ),
    denom=(
        1.00000000000000000000e0,
        5.16241922223786900600e-1,
        2.75690727171711638879e-1,
        7.18707184893542884080e-2,
        1.87136800286819336797e-2,
        2.38383441176345054929e-3,
        3.23509126477812051983e-4,
    ),
)


MINUS_2_1 = PadeTable(
    numer=(
        1.62598955251978523175e-1,
        2.30154661502402196205e-1,
        1.29233975368291684522e-1,
        3.80919553916980965587e-2,
        8.17724414618808505948e-3,
        1.95816800210481122544e-3,
        3.35259917978421935141e-4,
        1.22071311320012805777e-5,
    ),
    denom=(
        1.00000000000000000000e0,
        9.63771793313770952352e-2,
        2.23602260938227310054e-1,
        9.21944797677283179038e-3,
        1.82181136341939651516e-2,
        1.11216849284965970458e-4,
        5.57446347676836375810e-4,
    ),
)


MINUS_2_4 = PadeTable(
    numer=(
        5.88176189476056502705e-1,
        6.02287088109671443912e-1,
        2.57625533207709555766e-1,
        7.18618327959270311402e-2,
        1.25253508822578071586e-2,
        1.38226766788726569279e-3,
        7.32620930807726458318e-5,
        6.03054572349954521563e-7,
    ),
    denom=(
        1.00000000000000000000e0,
        9.54199287706410202241e-1,
        4.75472282467470181184e-1,
        1.46535255063482444037e-1,
        3.01738952830506685803e-2,
        3.99499614754061850707e-3,
        3.12152806855533452870e-4,
        8.05172630869950926085e-6,
    ),
)


MINUS_4_8 = PadeTable(
    numer=(
        5.51472757643673529728e-1,
        4.31610102565728326076e-1,
        1.48917299048993249813e-1,
        2.91436404351984593223e-2,
        3.28882396835475166496e-3,
        1.98804328328017984553e-4,
        4.64616080021023007510e-6,
        1.56438181721678316854e-8,
    ),
    denom=(
        1.00000000000000000000e0,
        8.56039144443074807236e-1,
        3.34960640112789039792e-1,
        7.52361661319904780994e-2,
        1.02014114984162352488e-2,
        7.97578941836281798696e-4,
        3.03148087501011803869e-5,
        3.26204774056531450781e-7,
    ),
)


MINUS_8_16 = PadeTable(
    numer=(
        4.18065737742332603636e-1,
        2.01623556896170223584e-1,
        3.95777759442922635350e-2,
        3.93741411702090093612e-3,
        2.00425740936518942152e-4,
        4.65171940494245225320e-6,
        3.71059603439031417668e-8,
        4.25509635435515655505e-11,
    ),
    denom=(
        1.00000000000000000000e0,
        5.40385920845795746296e-1,
        1.21525463547886545439e-1,
        1.43424513283784662739e-2,
        9.21390853863369654347e-4,
        3.01133286018215339596e-5,
        4.14450918250118242069e-7,
        1.51212616739642117089e-9,
    ),
)


MINUS_16_32 = PadeTable(
    numer=(
        2.98743266203527920889e-1,
        4.83180073178398517903e-2,
        2.69520487031514045597e-3,
        5.91803613302232034530e-5,
        4.28395710187165863411e-7,
        4.53343398774819924776e-10,
    ),
    denom=(
        1.00000000000000000000e0,
        1.92698084903936492789e-1,
        1.35679707446151988505e-2,
        4.15604984260210557217e-4,
        5.08716330609178693652e-6,
        1.66933196369632373584e-8,
    ),
)
