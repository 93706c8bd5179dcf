"""
Quantile approximants.

UPPER_* and LOWER_* tables cover p in [0.125, 0.5] directly (evaluated at
p - lower). An EXPMa_b table covers the bucket [2**-b, 2**-a) and is evaluated
at -log2(p * 2**a), which lies in (0, b - a].
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from pysatl_mapairy.approximation.pade import PadeTable


UPPER_0P125_0P25 = PadeTable(
    numer=(
        1.70276979914029733585e0,
        2.09991992116646276165e1,
        2.26775403775298867998e1,
        -4.85384304722129472833e2,
        -1.47107146466495573999e3,
        -7.08748473959943943929e1,
        1.54245210917147215257e3,
    ),
    denom=(
        1.00000000000000000000e0,
        2.13092357122115486375e1,
        1.57318281834689144053e2,
        4.42261730187813035957e2,
        2.10814431586717588454e2,
        -6.36700983439599552504e2,
        -2.82923881266630617596e2,
        1.36613971025062750340e2,
    ),
)


UPPER_0P25_0P5 = PadeTable(
    numer=(
        4.81512108276093785320e-1,
        -2.74296316128959647914e0,
        -3.29973875964825685757e1,
        -4.87536980816224603581e1,
        8.22233203036734027999e1,
        1.21654607908452130093e2,
        -6.66681853240657307279e1,
        -4.28101952511581488588e1,
    ),
    denom=(
        1.00000000000000000000e0,
        8.20189490825315245036e0,
        1.63469912146101848441e1,
        -1.52740920318273920072e1,
        -5.41684560257839409762e1,
        6.51733677169299416471e0,
        3.93092001388102589237e1,
        -9.59983666140749481195e-1,
        -9.95648827557655863699e-1,
        -1.32007124426778083829e0,
    ),
)


UPPER_EXPM3_4 = PadeTable(
    numer=(
        4.25692449785074345588e-1,
        3.10963501706596356267e-1,
        2.91357806215297069863e-2,
        2.34716342676849303244e-2,
        5.83137296293361915583e-3,
        3.71792415497884868748e-4,
        1.59538372221030642757e-4,
        4.74040834029330213692e-6,
    ),
    denom=(
        1.00000000000000000000e0,
        4.14801234415100707213e-1,
        1.04693730144480856638e-1,
        3.81581484862997435076e-2,
        8.95334009127358617362e-3,
        1.43316686981760147226e-3,
        1.81367766024620080990e-4,
        1.54779999748286671973e-5,
    ),
)


UPPER_EXPM4_8 = PadeTable(
    numer=(
        5.07341098045260541890e-1,
        3.11771145411143166935e-1,
        1.74515601081894060888e-1,
        8.46576990174024231338e-2,
        2.57510090204322149315e-2,
        8.26605326867021684811e-3,
        1.73081423934722046819e-3,
        3.36314161099011673569e-4,
        4.50990441180388912803e-5,
        4.53513191985642134268e-6,
        2.62304611053075404923e-7,
    ),
    denom=(
        1.00000000000000000000e0,
        5.28225379952156944029e-1,
        3.49662079845715371907e-1,
        1.45408903426879603625e-1,
        5.06773501409016231879e-2,
        1.45385556714043243731e-2,
        3.31235831325018043744e-3,
        6.06977554525543056050e-4,
        8.42406730405209749492e-5,
        8.32337989541696717905e-6,
        4.84923196546857128337e-7,
    ),
)


UPPER_EXPM8_16 = PadeTable(
    numer=(
        5.41774626094491510395e-1,
        4.11060141334529017898e-1,
        1.48195601801946264526e-1,
        3.33881552814492855873e-2,
        5.20893974732203890418e-3,
        5.84734765774178832854e-4,
        4.71028150898133935445e-5,
        2.59185739450631464618e-6,
        7.77428184258777394627e-8,
        2.51255632629650930196e-14,
    ),
    denom=(
        1.00000000000000000000e0,
        7.58341767924960527280e-1,
        2.73511775500642961539e-1,
        6.16011987856129890130e-2,
        9.61296002312356116021e-3,
        1.07890675777726076554e-3,
        8.69223632953458271977e-5,
        4.78248875031756169279e-6,
        1.43460852065144859304e-7,
    ),
)


UPPER_EXPM16_32 = PadeTable(
    numer=(
        5.41926067826974905066e-1,
        4.86926556246548518715e-1,
        2.11963908288176005856e-1,
        5.92200639925655576883e-2,
        1.18859816815542567438e-2,
        1.76833662992855443754e-3,
        2.21226152157950219596e-4,
        1.50444847316426133872e-5,
        1.87458213915373906356e-6,
    ),
    denom=(
        1.00000000000000000000e0,
        8.98511036742503939380e-1,
        3.91130673008184655152e-1,
        1.09277016228474605069e-1,
        2.19328471889880028208e-2,
        3.26305879571349016107e-3,
        4.08222014684743492069e-4,
        2.77611385768697969181e-5,
        3.45911046256304795257e-6,
    ),
)


UPPER_EXPM32_48 = PadeTable(
    numer=(
        5.41926070139289008291e-1,
        6.93835278521566240557e-1,
    ),
    denom=(
        1.00000000000000000000e0,
        1.28031352753196139513e0,
    ),
)


LOWER_0P125_0P25 = PadeTable(
    numer=(
        -2.18765177572396469657e0,
        -3.65752788934974426531e1,
        -1.81144810822028903904e2,
        -1.22434531262312950288e2,
        8.99451018491165823831e2,
        9.11333307522308410858e2,
        -8.76285742384616909177e2,
        -2.33786726970025938837e2,
    ),
    denom=(
        1.00000000000000000000e0,
        1.91797638291395345792e1,
        1.24293724082506952768e2,
        2.82393116012902543276e2,
        -1.80472369158936285558e1,
        -5.31764390192922827093e2,
        -5.60586018315854885788e1,
        1.21284324755968033098e2,
    ),
)


LOWER_0P25_0P375 = PadeTable(
    numer=(
        -1.63281240925531302762e0,
        -4.92351310795930780147e0,
        1.43448529253101759409e1,
        3.33182629948094299473e1,
        -3.06679026539368582747e1,
        -2.87298447423841965301e1,
        1.31575930750093554120e1,
    ),
    denom=(
        1.00000000000000000000e0,
        5.38761652244702318296e0,
        2.40932080746189543284e0,
        -1.69465870062123632126e1,
        -6.39998944283654848809e0,
        1.27168434054332272391e1,
    ),
)


LOWER_0P375_0P5 = PadeTable(
    numer=(
        -1.17326074020471664075e0,
        1.51461298154568349598e0,
        1.19979368094343490487e1,
        -5.94882121521324108164e0,
        -2.20619749774447254528e1,
        7.17766543775229176131e0,
        4.79284243496552841508e0,
    ),
    denom=(
        1.00000000000000000000e0,
        1.76268072706610602584e0,
        -4.88492535243404839734e0,
        -5.67524172432687656881e0,
        6.83327389947131710596e0,
        2.91338085774159042709e0,
        -1.41108918944159283950e0,
    ),
)


LOWER_EXPM3_4 = PadeTable(
    numer=(
        -2.18765177572396470773e0,
        -2.19887766409334094428e0,
        -7.77080107207360785208e-1,
        -1.15551765136654549650e-1,
        -6.64711321022529990367e-3,
        -9.74212491048543799073e-5,
    ),
    denom=(
        1.00000000000000000000e0,
        7.91919722132624625590e-1,
        2.17415447268626558639e-1,
        2.41474762519410575392e-2,
        9.41084107182696904714e-4,
        6.65754108797614202364e-6,
    ),
)


LOWER_EXPM4_8 = PadeTable(
    numer=(
        -2.59822399410385085335e0,
        -2.24306757759003016244e0,
        -7.36208578161752060979e-1,
        -1.15130762650287391576e-1,
        -8.77652386123688618995e-3,
        -2.96358888256575251437e-4,
        -3.33661282483762192446e-6,
        -4.19292241201527861927e-9,
    ),
    denom=(
        1.00000000000000000000e0,
        7.23065798041556418844e-1,
        1.96731305131315877264e-1,
        2.49952034298034383781e-2,
        1.49149568322111062242e-3,
        3.66010398525593921460e-5,
        2.46857713549279930857e-7,
    ),
)


LOWER_EXPM8_16 = PadeTable(
    numer=(
        -3.67354365380697580447e0,
        -1.52181685844845957618e0,
        -2.40883948836320845233e-1,
        -1.82424079258401987512e-2,
        -6.75844978572417703979e-4,
        -1.11273358356809152121e-5,
        -6.12797605223700996671e-8,
        -3.78061321691170114390e-11,
    ),
    denom=(
        1.00000000000000000000e0,
        3.57770840766081587688e-1,
        4.81290550545412209056e-2,
        3.02079969075162071807e-3,
        8.89589626547135423615e-5,
        1.07618717290978464257e-6,
        3.57383804712249921193e-9,
    ),
)


LOWER_EXPM16_32 = PadeTable(
    numer=(
        -4.92187819510636697128e0,
        -9.94924018698264727979e-1,
        -7.69914962772717316098e-2,
        -2.85558010159310978248e-3,
        -5.19022578720207406789e-5,
        -4.19975546950263453259e-7,
        -1.13886013623971006760e-9,
        -3.46758191090170732580e-13,
    ),
    denom=(
        1.00000000000000000000e0,
        1.77270673840643360017e-1,
        1.18099604045834575786e-2,
        3.66889581757166584963e-4,
        5.34484782554469770841e-6,
        3.19694601727035291809e-8,
        5.24649233511937214948e-11,
    ),
)


LOWER_EXPM32_64 = PadeTable(
    numer=(
        -6.41443550638291133784e0,
        -6.38369359780748328332e-1,
        -2.43420704406734621618e-2,
        -4.45274771094277987075e-4,
        -3.99529078051262843241e-6,
        -1.59758677464731620413e-8,
        -2.14338367751477432622e-11,
        -3.23343844538964435927e-15,
    ),
    denom=(
        1.00000000000000000000e0,
        8.79845511272943785289e-2,
        2.90839059356197474893e-3,
        4.48172838083912540123e-5,
        3.23770691025690100895e-7,
        9.60156044379859908674e-10,
        7.81134095049301988435e-13,
    ),
)


LOWER_EXPM64_128 = PadeTable(
    numer=(
        -8.23500806363233610938e0,
        -4.05652655284908839003e-1,
        -7.65978833819859622912e-3,
        -6.94194676058731901672e-5,
        -3.08771646223818451436e-7,
        -6.12443207313641110962e-10,
        -4.07882839359528825925e-13,
        -3.05720104049292610799e-17,
    ),
    denom=(
        1.00000000000000000000e0,
        4.37395212065018405474e-2,
        7.18654254114820140590e-4,
        5.50371158026951899491e-6,
        1.97583864365011234715e-8,
        2.91169706068202431036e-11,
        1.17716830382540977039e-14,
    ),
)


LOWER_EXPM128_256 = PadeTable(
    numer=(
        -1.04845570631944023913e1,
        -2.56502856165700644836e-1,
        -2.40615394566347412600e-3,
        -1.08364601171893250764e-5,
        -2.39603255140022514289e-8,
        -2.36344017673944676435e-11,
        -7.83146284114485675414e-15,
        -2.92218240202835807955e-19,
    ),
    denom=(
        1.00000000000000000000e0,
        2.17740414929742679904e-2,
        1.78084231709097280884e-4,
        6.78870668961146609668e-7,
        1.21313439060489363960e-9,
        8.89917934953781122884e-13,
        1.79115540847944524599e-16,
    ),
)


LOWER_EXPM256_512 = PadeTable(
    numer=(
        -1.32865827226175698181e1,
        -1.61802434199627472010e-1,
        -7.55642602577784211259e-4,
        -1.69457608092375302291e-6,
        -1.86612389867293722402e-9,
        -9.17015770142364635163e-13,
        -1.51422473889348610974e-16,
        -2.81661279271583206526e-21,
    ),
    denom=(
        1.00000000000000000000e0,
        1.08518414679241420227e-2,
        4.42335224797004486239e-5,
        8.40387821972524402121e-8,
        7.48486746424527560620e-11,
        2.73676810622938942041e-14,
        2.74588200481263214866e-18,
    ),
)


LOWER_EXPM512_1024 = PadeTable(
    numer=(
        -1.67937186583822375593e1,
        -1.01958138247797604098e-1,
        -2.37409774265951876695e-4,
        -2.65483321307104128810e-7,
        -1.45803536947907216594e-10,
        -3.57375116523338994342e-14,
        -2.94401318006358820268e-18,
        -2.73260616170245224789e-23,
    ),
    denom=(
        1.00000000000000000000e0,
        5.41357843707822974161e-3,
        1.10082540037527566536e-5,
        1.04338126042963003178e-8,
        4.63619608458569600346e-12,
        8.45781310395535984099e-16,
        4.23432554226506409568e-20,
    ),
)
