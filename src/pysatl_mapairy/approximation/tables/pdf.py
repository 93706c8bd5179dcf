"""
Density approximants.

PLUS_* tables cover u in [lower, upper] evaluated at u - lower; PLUS_LIMIT is
evaluated at u**-1.5 beyond u = 64. MINUS_1_0 and MINUS_2_1 are evaluated at
1 - v and 2 - v; MINUS_2_4 .. MINUS_16_32 at v - lower and carry the
stretched-exponential factor applied by the caller.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from pysatl_mapairy.approximation.pade import PadeTable


PLUS_0_1 = PadeTable(
    numer=(
        1.97516171847191855610e-1,
        3.67488253628465083737e-2,
        -9.73242224038828612673e-4,
        2.32207514136635673061e-3,
        5.69067907423210669037e-5,
        -6.02637387141524535193e-5,
        1.04960324426666933327e-5,
        -6.58470237954242016920e-7,
    ),
    denom=(
        1.00000000000000000000e0,
        7.09464351647314165710e-1,
        3.66413036246461392316e-1,
        1.10947882302862241488e-1,
        2.65928486676817177159e-2,
        3.75507284977386290874e-3,
        4.03789594641339005785e-4,
    ),
)


PLUS_1_2 = PadeTable(
    numer=(
        1.06251243013238748252e-1,
        1.38178831205785069108e-2,
        4.19280374368049006206e-3,
        8.54607219684690930289e-4,
        -7.46881084120928210702e-5,
        1.47110856483345063335e-5,
        -1.30090180307471994500e-6,
        5.24801123304330014713e-8,
    ),
    denom=(
        1.00000000000000000000e0,
        8.10853683888611687140e-1,
        3.89361261627717143905e-1,
        1.15124062681082170577e-1,
        2.38803416611949902468e-2,
        3.08616898814509065071e-3,
        2.43760043942846261876e-4,
        1.34538901435238836768e-6,
    ),
)


PLUS_2_4 = PadeTable(
    numer=(
        5.33842514891989443409e-2,
        1.23301980674903270971e-2,
        3.45717831433988631923e-3,
        3.27034449923176875761e-4,
        1.20406794831890291348e-5,
        5.77489170397965604669e-7,
        -1.15255267205685159063e-7,
        9.15896323073109992939e-9,
        -3.14068002815368247985e-10,
    ),
    denom=(
        1.00000000000000000000e0,
        9.08772985520393226044e-1,
        4.26418573702560818267e-1,
        1.22033746594868893316e-1,
        2.27934009200310243172e-2,
        2.60658999011198623962e-3,
        1.54461660261435227768e-4,
    ),
)


PLUS_4_8 = PadeTable(
    numer=(
        1.58950538583133457384e-2,
        7.47835440063141601948e-3,
        1.81137244353261478410e-3,
        2.26935565382135588558e-4,
        1.43877113825683795505e-5,
        2.08242747557417233626e-7,
        -1.54976465724771282989e-9,
        1.30762989300333026019e-11,
    ),
    denom=(
        1.00000000000000000000e0,
        9.95505437381674174441e-1,
        4.58882737262511297099e-1,
        1.25031310192148865496e-1,
        2.15727229249904102247e-2,
        2.33597081566665672569e-3,
        1.45198998318300328562e-4,
        3.87962234445835345676e-6,
    ),
)


PLUS_8_16 = PadeTable(
    numer=(
        3.22517551525042172428e-3,
        1.12822806030796339659e-3,
        1.54489389961322571031e-4,
        9.28479992527909796427e-6,
        2.06168350199745832262e-7,
        9.05110751997021418539e-10,
        -2.15498112371756202097e-12,
        6.41838355699777435924e-15,
    ),
    denom=(
        1.00000000000000000000e0,
        6.53390465399680164234e-1,
        1.82759048270449018482e-1,
        2.80407546367978533849e-2,
        2.50853443923476718145e-3,
        1.27671852825846245421e-4,
        3.28380135691060279203e-6,
        3.06545317089055335742e-8,
    ),
)


PLUS_16_32 = PadeTable(
    numer=(
        5.82527663232857270992e-4,
        6.89502117025124630567e-5,
        2.24909795087265741433e-6,
        2.18576787334972903790e-8,
        3.39014723444178274435e-11,
        -9.74481309265612390297e-15,
        -1.13308546492906818388e-16,
        5.32472028720777735712e-19,
    ),
    denom=(
        1.00000000000000000000e0,
        2.74018883667663396766e-1,
        2.95901195665990089660e-2,
        1.57901733512147920251e-3,
        4.24965124147621236633e-5,
        5.17522027193205842016e-7,
        2.00522219276570039934e-9,
    ),
)


PLUS_32_64 = PadeTable(
    numer=(
        1.03264853379349880039e-4,
        5.35256306644392405447e-6,
        9.00657716972118816692e-8,
        5.34913574042209793720e-10,
        6.70752605041678779380e-13,
        -5.30089923101856817552e-16,
        7.28133811621687143754e-19,
        -7.38047553655951666420e-22,
    ),
    denom=(
        1.00000000000000000000e0,
        1.29920843258164337377e-1,
        6.75018577147646502386e-3,
        1.77694968039695671819e-4,
        2.46428299911920942946e-6,
        1.67165053157990942546e-8,
        4.19496974141131087116e-11,
    ),
)


PLUS_LIMIT = PadeTable(
    numer=(
        5.98413420602149016910e-1,
        3.14584075817417883086e-5,
        1.62977928311793051895e1,
        -4.12903117172994371875e-4,
        -1.06404478702135751872e2,
    ),
    denom=(
        1.00000000000000000000e0,
        5.25696892802060720079e-5,
        4.03600055498020483920e1,
    ),
)


MINUS_1_0 = PadeTable(
    numer=(
        2.76859868856746781256e-1,
        1.10489814676299003241e-1,
        -6.25690643488236678667e-3,
        -1.17905420222527577236e-3,
        1.27188963720084274122e-3,
        -7.20575105181207907889e-5,
        -2.22575633858411851032e-5,
        2.94270091008508492304e-6,
    ),
    denom=(
        1.00000000000000000000e0,
        4.98673671503410894284e-1,
        3.15907666864554716291e-1,
        8.34463558393629855977e-2,
        2.71804643993972494173e-2,
        3.52187050938036578406e-3,
        7.03072974279509263844e-4,
    ),
)


MINUS_2_1 = PadeTable(
    numer=(
        2.14483832832989822788e-1,
        3.72789690317712876663e-1,
        1.86473650057086284496e-1,
        1.31182724166379598907e-2,
        -9.00695064809774432392e-3,
        3.46884420664996747052e-4,
        4.88651392754189961173e-4,
        -6.13516242712196835055e-5,
    ),
    denom=(
        1.00000000000000000000e0,
        1.06478618107122200489e0,
        4.08809060854459518663e-1,
        2.66617598099501800866e-1,
        4.53526315786051807494e-2,
        2.44078693689626940834e-2,
        1.52822572478697831870e-3,
        8.69480001029742502197e-4,
    ),
)


MINUS_2_4 = PadeTable(
    numer=(
        2.74308494787955998605e-1,
        4.87765991440983416392e-1,
        3.84524365110270427617e-1,
        1.77409497505926097339e-1,
        5.25612864287310961520e-2,
        1.01528615034079765421e-2,
        1.20417225696161842090e-3,
        6.97462693097107007719e-5,
    ),
    denom=(
        1.00000000000000000000e0,
        1.81256903248465876424e0,
        1.43959302060852067876e0,
        6.65882284117861804351e-1,
        1.97537712781845593211e-1,
        3.81732970028510912201e-2,
        4.52767489928026542226e-3,
        2.62240194911920120003e-4,
    ),
)


MINUS_4_8 = PadeTable(
    numer=(
        2.67391547707456587286e-1,
        3.39319035621314371924e-1,
        1.85434799940724207230e-1,
        5.63667456320679857693e-2,
        1.01231164548944177474e-2,
        1.02501575174439362864e-3,
        4.60769537123286016400e-5,
        -4.92754650783224582641e-13,
    ),
    denom=(
        1.00000000000000000000e0,
        1.27271216837333318516e0,
        6.96551952883867277759e-1,
        2.11871363524516350422e-1,
        3.80622887806509632537e-2,
        3.85400280812991562328e-3,
        1.73246593953823694311e-4,
    ),
)


MINUS_8_16 = PadeTable(
    numer=(
        2.66153901932100301337e-1,
        1.65767350677458230714e-1,
        4.19801402197670061146e-2,
        5.39337995172784579558e-3,
        3.50811247702301287586e-4,
        9.21758454778883157515e-6,
    ),
    denom=(
        1.00000000000000000000e0,
        6.23092941554668369107e-1,
        1.57829914506366827914e-1,
        2.02787979758160988615e-2,
        1.31903008994475216511e-3,
        3.46575870637847438219e-5,
    ),
)


MINUS_16_32 = PadeTable(
    numer=(
        2.65985830928929730672e-1,
        7.12399432979613322705e-2,
        7.12711058905939981164e-3,
        3.15786968248685705045e-4,
        5.22817461604216528366e-6,
    ),
    denom=(
        1.00000000000000000000e0,
        2.67850712372594664473e-1,
        2.67975253839917164432e-2,
        1.18734081496856828219e-3,
        1.96576354766834858479e-5,
    ),
)
