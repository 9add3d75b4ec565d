"""Poseidon parameters over BN254 for a state of width 3 (two inputs)."""

MDS: tuple[tuple[int, int, int], ...] = (
    (
        0x109B7F411BA0E4C9B2B70CAF5C36A7B194BE7C11AD24378BFEDB68592BA8118B,
        0x16ED41E13BB9C0C66AE119424FDDBCBC9314DC9FDBDEEA55D6C64543DC4903E0,
        0x2B90BBA00FCA0589F617E7DCBFE82E0DF706AB640CEB247B791A93B74E36736D,
    ),
    (
        0x2969F27EED31A480B9C36C764379DBCA2CC8FDD1415C3DDED62940BCDE0BD771,
        0x2E2419F9EC02EC394C9871C832963DC1B89D743C8C7B964029B2311687B1FE23,
        0x101071F0032379B697315876690F053D148D4E109F5FB065C8AACC55A0F89BFA,
    ),
    (
        0x143021EC686A3F330D5F9E654638065CE6CD79E28C5B3753326244EE65A1B1A7,
        0x176CC029695AD02582A70EFF08A6FD99D057E12E58E7D7B6B16CDFABC8EE2911,
        0x19A3FC0A56702BF417BA7FEE3802593FA644470307043F7773279CD71D25D5E0,
    ),
)

ROUND_CONSTANTS: tuple[tuple[int, int, int], ...] = (
    (
        0x0EE9A592BA9A9518D05986D656F40C2114C4993C11BB29938D21D47304CD8E6E,
        0x00F1445235F2148C5986587169FC1BCD887B08D4D00868DF5696FFF40956E864,
        0x08DFF3487E8AC99E1F29A058D0FA80B930C728730B7AB36CE879F3890ECF73F5,
    ),
    (
        0x2F27BE690FDAEE46C3CE28F7532B13C856C35342C84BDA6E20966310FADC01D0,
        0x2B2AE1ACF68B7B8D2416BEBF3D4F6234B763FE04B8043EE48B8327BEBCA16CF2,
        0x0319D062072BEF7ECCA5EAC06F97D4D55952C175AB6B03EAE64B44C7DBF11CFA,
    ),
    (
        0x28813DCAEBAEAA828A376DF87AF4A63BC8B7BF27AD49C6298EF7B387BF28526D,
        0x2727673B2CCBC903F181BF38E1C1D40D2033865200C352BC150928ADDDF9CB78,
        0x234EC45CA27727C2E74ABD2B2A1494CD6EFBD43E340587D6B8FB9E31E65CC632,
    ),
    (
        0x15B52534031AE18F7F862CB2CF7CF760AB10A8150A337B1CCD99FF6E8797D428,
        0x0DC8FAD6D9E4B35F5ED9A3D186B79CE38E0E8A8D1B58B132D701D4EECF68D1F6,
        0x1BCD95FFC211FBCA600F705FAD3FB567EA4EB378F62E1FEC97805518A47E4D9C,
    ),
    (
        0x10520B0AB721CADFE9EFF81B016FC34DC76DA36C2578937817CB978D069DE559,
        0x1F6D48149B8E7F7D9B257D8ED5FBBAF42932498075FED0ACE88A9EB81F5627F6,
        0x1D9655F652309014D29E00EF35A2089BFFF8DC1C816F0DC9CA34BDB5460C8705,
    ),
    (
        0x04DF5A56FF95BCAFB051F7B1CD43A99BA731FF67E47032058FE3D4185697CC7D,
        0x0672D995F8FFF640151B3D290CEDAF148690A10A8C8424A7F6EC282B6E4BE828,
        0x099952B414884454B21200D7FFAFDD5F0C9A9DCC06F2708E9FC1D8209B5C75B9,
    ),
    (
        0x052CBA2255DFD00C7C483143BA8D469448E43586A9B4CD9183FD0E843A6B9FA6,
        0x0B8BADEE690ADB8EB0BD74712B7999AF82DE55707251AD7716077CB93C464DDC,
        0x119B1590F13307AF5A1EE651020C07C749C15D60683A8050B963D0A8E4B2BDD1,
    ),
    (
        0x03150B7CD6D5D17B2529D36BE0F67B832C4ACFC884EF4EE5CE15BE0BFB4A8D09,
        0x2CC6182C5E14546E3CF1951F173912355374EFB83D80898ABE69CB317C9EA565,
        0x005032551E6378C450CFE129A404B3764218CADEDAC14E2B92D2CD73111BF0F9,
    ),
    (
        0x233237E3289BAA34BB147E972EBCB9516469C399FCC069FB88F9DA2CC28276B5,
        0x05C8F4F4EBD4A6E3C980D31674BFBE6323037F21B34AE5A4E80C2D4C24D60280,
        0x0A7B1DB13042D396BA05D818A319F25252BCF35EF3AEED91EE1F09B2590FC65B,
    ),
    (
        0x2A73B71F9B210CF5B14296572C9D32DBF156E2B086FF47DC5DF542365A404EC0,
        0x1AC9B0417ABCC9A1935107E9FFC91DC3EC18F2C4DBE7F22976A760BB5C50C460,
        0x12C0339AE08374823FABB076707EF479269F3E4D6CB104349015EE046DC93FC0,
    ),
    (
        0x0B7475B102A165AD7F5B18DB4E1E704F52900AA3253BAAC68246682E56E9A28E,
        0x037C2849E191CA3EDB1C5E49F6E8B8917C843E379366F2EA32AB3AA88D7F8448,
        0x05A6811F8556F014E92674661E217E9BD5206C5C93A07DC145FDB176A716346F,
    ),
    (
        0x29A795E7D98028946E947B75D54E9F044076E87A7B2883B47B675EF5F38BD66E,
        0x20439A0C84B322EB45A3857AFC18F5826E8C7382C8A1585C507BE199981FD22F,
        0x2E0BA8D94D9ECF4A94EC2050C7371FF1BB50F27799A84B6D4A2A6F2A0982C887,
    ),
    (
        0x143FD115CE08FB27CA38EB7CCE822B4517822CD2109048D2E6D0DDCCA17D71C8,
        0x0C64CBECB1C734B857968DBBDCF813CDF8611659323DBCBFC84323623BE9CAF1,
        0x028A305847C683F646FCA925C163FF5AE74F348D62C2B670F1426CEF9403DA53,
    ),
    (
        0x2E4EF510FF0B6FDA5FA940AB4C4380F26A6BCB64D89427B824D6755B5DB9E30C,
        0x0081C95BC43384E663D79270C956CE3B8925B4F6D033B078B96384F50579400E,
        0x2ED5F0C91CBD9749187E2FADE687E05EE2491B349C039A0BBA8A9F4023A0BB38,
    ),
    (
        0x30509991F88DA3504BBF374ED5AAE2F03448A22C76234C8C990F01F33A735206,
        0x1C3F20FD55409A53221B7C4D49A356B9F0A1119FB2067B41A7529094424EC6AD,
        0x10B4E7F3AB5DF003049514459B6E18EEC46BB2213E8E131E170887B47DDCB96C,
    ),
    (
        0x2A1982979C3FF7F43DDD543D891C2ABDDD80F804C077D775039AA3502E43ADEF,
        0x1C74EE64F15E1DB6FEDDBEAD56D6D55DBA431EBC396C9AF95CAD0F1315BD5C91,
        0x07533EC850BA7F98EAB9303CACE01B4B9E4F2E8B82708CFA9C2FE45A0AE146A0,
    ),
    (
        0x21576B438E500449A151E4EEAF17B154285C68F42D42C1808A11ABF3764C0750,
        0x2F17C0559B8FE79608AD5CA193D62F10BCE8384C815F0906743D6930836D4A9E,
        0x2D477E3862D07708A79E8AAE946170BC9775A4201318474AE665B0B1B7E2730E,
    ),
    (
        0x162F5243967064C390E095577984F291AFBA2266C38F5ABCD89BE0F5B2747EAB,
        0x2B4CB233EDE9BA48264ECD2C8AE50D1AD7A8596A87F29F8A7777A70092393311,
        0x2C8FBCB2DD8573DC1DBAF8F4622854776DB2EECE6D85C4CF4254E7C35E03B07A,
    ),
    (
        0x1D6F347725E4816AF2FF453F0CD56B199E1B61E9F601E9ADE5E88DB870949DA9,
        0x204B0C397F4EBE71EBC2D8B3DF5B913DF9E6AC02B68D31324CD49AF5C4565529,
        0x0C4CB9DC3C4FD8174F1149B3C63C3C2F9ECB827CD7DC25534FF8FB75BC79C502,
    ),
    (
        0x174AD61A1448C899A25416474F4930301E5C49475279E0639A616DDC45BC7B54,
        0x1A96177BCF4D8D89F759DF4EC2F3CDE2EAAA28C177CC0FA13A9816D49A38D2EF,
        0x066D04B24331D71CD0EF8054BC60C4FF05202C126A233C1A8242ACE360B8A30A,
    ),
    (
        0x2A4C4FC6EC0B0CF52195782871C6DD3B381CC65F72E02AD527037A62AA1BD804,
        0x13AB2D136CCF37D447E9F2E14A7CEDC95E727F8446F6D9D7E55AFC01219FD649,
        0x1121552FCA26061619D24D843DC82769C1B04FCEC26F55194C2E3E869ACC6A9A,
    ),
    (
        0x00EF653322B13D6C889BC81715C37D77A6CD267D595C4A8909A5546C7C97CFF1,
        0x0E25483E45A665208B261D8BA74051E6400C776D652595D9845ACA35D8A397D3,
        0x29F536DCB9DD7682245264659E15D88E395AC3D4DDE92D8C46448DB979EEBA89,
    ),
    (
        0x2A56EF9F2C53FEBADFDA33575DBDBD885A124E2780BBEA170E456BAACE0FA5BE,
        0x1C8361C78EB5CF5DECFB7A2D17B5C409F2AE2999A46762E8EE416240A8CB9AF1,
        0x151AFF5F38B20A0FC0473089AAF0206B83E8E68A764507BFD3D0AB4BE74319C5,
    ),
    (
        0x04C6187E41ED881DC1B239C88F7F9D43A9F52FC8C8B6CDD1E76E47615B51F100,
        0x13B37BD80F4D27FB10D84331F6FB6D534B81C61ED15776449E801B7DDC9C2967,
        0x01A5C536273C2D9DF578BFBD32C17B7A2CE3664C2A52032C9321CEB1C4E8A8E4,
    ),
    (
        0x2AB3561834CA73835AD05F5D7ACB950B4A9A2C666B9726DA832239065B7C3B02,
        0x1D4D8EC291E720DB200FE6D686C0D613ACAF6AF4E95D3BF69F7ED516A597B646,
        0x041294D2CC484D228F5784FE7919FD2BB925351240A04B711514C9C80B65AF1D,
    ),
    (
        0x154AC98E01708C611C4FA715991F004898F57939D126E392042971DD90E81FC6,
        0x0B339D8ACCA7D4F83EEDD84093AEF51050B3684C88F8B0B04524563BC6EA4DA4,
        0x0955E49E6610C94254A4F84CFBAB344598F0E71EAFF4A7DD81ED95B50839C82E,
    ),
    (
        0x06746A6156EBA54426B9E22206F15ABCA9A6F41E6F535C6F3525401EA0654626,
        0x0F18F5A0ECD1423C496F3820C549C27838E5790E2BD0A196AC917C7FF32077FB,
        0x04F6EECA1751F7308AC59EFF5BEB261E4BB563583EDE7BC92A738223D6F76E13,
    ),
    (
        0x2B56973364C4C4F5C1A3EC4DA3CDCE038811EB116FB3E45BC1768D26FC0B3758,
        0x123769DD49D5B054DCD76B89804B1BCB8E1392B385716A5D83FEB65D437F29EF,
        0x2147B424FC48C80A88EE52B91169AACEA989F6446471150994257B2FB01C63E9,
    ),
    (
        0x0FDC1F58548B85701A6C5505EA332A29647E6F34AD4243C2EA54AD897CEBE54D,
        0x12373A8251FEA004DF68ABCF0F7786D4BCEFF28C5DBBE0C3944F685CC0A0B1F2,
        0x21E4F4EA5F35F85BAD7EA52FF742C9E8A642756B6AF44203DD8A1F35C1A90035,
    ),
    (
        0x16243916D69D2CA3DFB4722224D4C462B57366492F45E90D8A81934F1BC3B147,
        0x1EFBE46DD7A578B4F66F9ADBC88B4378ABC21566E1A0453CA13A4159CAC04AC2,
        0x07EA5E8537CF5DD08886020E23A7F387D468D5525BE66F853B672CC96A88969A,
    ),
    (
        0x05A8C4F9968B8AA3B7B478A30F9A5B63650F19A75E7CE11CA9FE16C0B76C00BC,
        0x20F057712CC21654FBFE59BD345E8DAC3F7818C701B9C7882D9D57B72A32E83F,
        0x04A12EDEDA9DFD689672F8C67FEE31636DCD8E88D01D49019BD90B33EB33DB69,
    ),
    (
        0x27E88D8C15F37DCEE44F1E5425A51DECBD136CE5091A6767E49EC9544CCD101A,
        0x2FEED17B84285ED9B8A5C8C5E95A41F66E096619A7703223176C41EE433DE4D1,
        0x1ED7CC76EDF45C7C404241420F729CF394E5942911312A0D6972B8BD53AFF2B8,
    ),
    (
        0x15742E99B9BFA323157FF8C586F5660EAC6783476144CDCADF2874BE45466B1A,
        0x1AAC285387F65E82C895FC6887DDF40577107454C6EC0317284F033F27D0C785,
        0x25851C3C845D4790F9DDADBDB6057357832E2E7A49775F71EC75A96554D67C77,
    ),
    (
        0x15A5821565CC2EC2CE78457DB197EDF353B7EBBA2C5523370DDCCC3D9F146A67,
        0x2411D57A4813B9980EFA7E31A1DB5966DCF64F36044277502F15485F28C71727,
        0x002E6F8D6520CD4713E335B8C0B6D2E647E9A98E12F4CD2558828B5EF6CB4C9B,
    ),
    (
        0x2FF7BC8F4380CDE997DA00B616B0FCD1AF8F0E91E2FE1ED7398834609E0315D2,
        0x00B9831B948525595EE02724471BCD182E9521F6B7BB68F1E93BE4FEBB0D3CBE,
        0x0A2F53768B8EBF6A86913B0E57C04E011CA408648A4743A87D77ADBF0C9C3512,
    ),
    (
        0x00248156142FD0373A479F91FF239E960F599FF7E94BE69B7F2A290305E1198D,
        0x171D5620B87BFB1328CF8C02AB3F0C9A397196AA6A542C2350EB512A2B2BCDA9,
        0x170A4F55536F7DC970087C7C10D6FAD760C952172DD54DD99D1045E4EC34A808,
    ),
    (
        0x29ABA33F799FE66C2EF3134AEA04336ECC37E38C1CD211BA482ECA17E2DBFAE1,
        0x1E9BC179A4FDD758FDD1BB1945088D47E70D114A03F6A0E8B5BA650369E64973,
        0x1DD269799B660FAD58F7F4892DFB0B5AFEAAD869A9C4B44F9C9E1C43BDAF8F09,
    ),
    (
        0x22CDBC8B70117AD1401181D02E15459E7CCD426FE869C7C95D1DD2CB0F24AF38,
        0x0EF042E454771C533A9F57A55C503FCEFD3150F52ED94A7CD5BA93B9C7DACEFD,
        0x11609E06AD6C8FE2F287F3036037E8851318E8B08A0359A03B304FFCA62E8284,
    ),
    (
        0x1166D9E554616DBA9E753EEA427C17B7FECD58C076DFE42708B08F5B783AA9AF,
        0x2DE52989431A859593413026354413DB177FBF4CD2AC0B56F855A888357EE466,
        0x3006EB4FFC7A85819A6DA492F3A8AC1DF51AEE5B17B8E89D74BF01CF5F71E9AD,
    ),
    (
        0x2AF41FBB61BA8A80FDCF6FFF9E3F6F422993FE8F0A4639F962344C8225145086,
        0x119E684DE476155FE5A6B41A8EBC85DB8718AB27889E85E781B214BACE4827C3,
        0x1835B786E2E8925E188BEA59AE363537B51248C23828F047CFF784B97B3FD800,
    ),
    (
        0x28201A34C594DFA34D794996C6433A20D152BAC2A7905C926C40E285AB32EEB6,
        0x083EFD7A27D1751094E80FEFAF78B000864C82EB571187724A761F88C22CC4E7,
        0x0B6F88A3577199526158E61CEEA27BE811C16DF7774DD8519E079564F61FD13B,
    ),
    (
        0x0EC868E6D15E51D9644F66E1D6471A94589511CA00D29E1014390E6EE4254F5B,
        0x2AF33E3F866771271AC0C9B3ED2E1142ECD3E74B939CD40D00D937AB84C98591,
        0x0B520211F904B5E7D09B5D961C6ACE7734568C547DD6858B364CE5E47951F178,
    ),
    (
        0x0B2D722D0919A1AAD8DB58F10062A92EA0C56AC4270E822CCA228620188A1D40,
        0x1F790D4D7F8CF094D980CEB37C2453E957B54A9991CA38BBE0061D1ED6E562D4,
        0x0171EB95DFBF7D1EAEA97CD385F780150885C16235A2A6A8DA92CEB01E504233,
    ),
    (
        0x0C2D0E3B5FD57549329BF6885DA66B9B790B40DEFD2C8650762305381B168873,
        0x1162FB28689C27154E5A8228B4E72B377CBCAFA589E283C35D3803054407A18D,
        0x2F1459B65DEE441B64AD386A91E8310F282C5A92A89E19921623EF8249711BC0,
    ),
    (
        0x1E6FF3216B688C3D996D74367D5CD4C1BC489D46754EB712C243F70D1B53CFBB,
        0x01CA8BE73832B8D0681487D27D157802D741A6F36CDC2A0576881F9326478875,
        0x1F7735706FFE9FC586F976D5BDF223DC680286080B10CEA00B9B5DE315F9650E,
    ),
    (
        0x2522B60F4EA3307640A0C2DCE041FBA921AC10A3D5F096EF4745CA838285F019,
        0x23F0BEE001B1029D5255075DDC957F833418CAD4F52B6C3F8CE16C235572575B,
        0x2BC1AE8B8DDBB81FCAAC2D44555ED5685D142633E9DF905F66D9401093082D59,
    ),
    (
        0x0F9406B8296564A37304507B8DBA3ED162371273A07B1FC98011FCD6AD72205F,
        0x2360A8EB0CC7DEFA67B72998DE90714E17E75B174A52EE4ACB126C8CD995F0A8,
        0x15871A5CDDEAD976804C803CBAEF255EB4815A5E96DF8B006DCBBC2767F88948,
    ),
    (
        0x193A56766998EE9E0A8652DD2F3B1DA0362F4F54F72379544F957CCDEEFB420F,
        0x2A394A43934F86982F9BE56FF4FAB1703B2E63C8AD334834E4309805E777AE0F,
        0x1859954CFEB8695F3E8B635DCB345192892CD11223443BA7B4166E8876C0D142,
    ),
    (
        0x04E1181763050E58013444DBCB99F1902B11BC25D90BBDCA408D3819F4FED32B,
        0x0FDB253DEE83869D40C335EA64DE8C5BB10EB82DB08B5E8B1F5E5552BFD05F23,
        0x058CBE8A9A5027BDAA4EFB623ADEAD6275F08686F1C08984A9D7C5BAE9B4F1C0,
    ),
    (
        0x1382EDCE9971E186497EADB1AEB1F52B23B4B83BEF023AB0D15228B4CCECA59A,
        0x03464990F045C6EE0819CA51FD11B0BE7F61B8EB99F14B77E1E6634601D9E8B5,
        0x23F7BFC8720DC296FFF33B41F98FF83C6FCAB4605DB2EB5AAA5BC137AEB70A58,
    ),
    (
        0x0A59A158E3EEC2117E6E94E7F0E9DECF18C3FFD5E1531A9219636158BBAF62F2,
        0x06EC54C80381C052B58BF23B312FFD3CE2C4EBA065420AF8F4C23ED0075FD07B,
        0x118872DC832E0EB5476B56648E867EC8B09340F7A7BCB1B4962F0FF9ED1F9D01,
    ),
    (
        0x13D69FA127D834165AD5C7CBA7AD59ED52E0B0F0E42D7FEA95E1906B520921B1,
        0x169A177F63EA681270B1C6877A73D21BDE143942FB71DC55FD8A49F19F10C77B,
        0x04EF51591C6EAD97EF42F287ADCE40D93ABEB032B922F66FFB7E9A5A7450544D,
    ),
    (
        0x256E175A1DC079390ECD7CA703FB2E3B19EC61805D4F03CED5F45EE6DD0F69EC,
        0x30102D28636ABD5FE5F2AF412FF6004F75CC360D3205DD2DA002813D3E2CEEB2,
        0x10998E42DFCD3BBF1C0714BC73EB1BF40443A3FA99BEF4A31FD31BE182FCC792,
    ),
    (
        0x193EDD8E9FCF3D7625FA7D24B598A1D89F3362EAF4D582EFECAD76F879E36860,
        0x18168AFD34F2D915D0368CE80B7B3347D1C7A561CE611425F2664D7AA51F0B5D,
        0x29383C01EBD3B6AB0C017656EBE658B6A328EC77BC33626E29E2E95B33EA6111,
    ),
    (
        0x10646D2F2603DE39A1F4AE5E7771A64A702DB6E86FB76AB600BF573F9010C711,
        0x0BEB5E07D1B27145F575F1395A55BF132F90C25B40DA7B3864D0242DCB1117FB,
        0x16D685252078C133DC0D3ECAD62B5C8830F95BB2E54B59ABDFFBF018D96FA336,
    ),
    (
        0x0A6ABD1D833938F33C74154E0404B4B40A555BBBEC21DDFAFD672DD62047F01A,
        0x1A679F5D36EB7B5C8EA12A4C2DEDC8FEB12DFFEEC450317270A6F19B34CF1860,
        0x0980FB233BD456C23974D50E0EBFDE4726A423EADA4E8F6FFBC7592E3F1B93D6,
    ),
    (
        0x161B42232E61B84CBF1810AF93A38FC0CECE3D5628C9282003EBACB5C312C72B,
        0x0ADA10A90C7F0520950F7D47A60D5E6A493F09787F1564E5D09203DB47DE1A0B,
        0x1A730D372310BA82320345A29AC4238ED3F07A8A2B4E121BB50DDB9AF407F451,
    ),
    (
        0x2C8120F268EF054F817064C369DDA7EA908377FEABA5C4DFFBDA10EF58E8C556,
        0x1C7C8824F758753FA57C00789C684217B930E95313BCB73E6E7B8649A4968F70,
        0x2CD9ED31F5F8691C8E39E4077A74FAA0F400AD8B491EB3F7B47B27FA3FD1CF77,
    ),
    (
        0x23FF4F9D46813457CF60D92F57618399A5E022AC321CA550854AE23918A22EEA,
        0x09945A5D147A4F66CEECE6405DDDD9D0AF5A2C5103529407DFF1EA58F180426D,
        0x188D9C528025D4C2B67660C6B771B90F7C7DA6EAA29D3F268A6DD223EC6FC630,
    ),
    (
        0x3050E37996596B7F81F68311431D8734DBA7D926D3633595E0C0D8DDF4F0F47F,
        0x15AF1169396830A91600CA8102C35C426CEAE5461E3F95D89D829518D30AFD78,
        0x1DA6D09885432EA9A06D9F37F873D985DAE933E351466B2904284DA3320D8ACC,
    ),
    (
        0x2796EA90D269AF29F5F8ACF33921124E4E4FAD3DBE658945E546EE411DDAA9CB,
        0x202D7DD1DA0F6B4B0325C8B3307742F01E15612EC8E9304A7CB0319E01D32D60,
        0x096D6790D05BB759156A952BA263D672A2D7F9C788F4C831A29DACE4C0F8BE5F,
    ),
    (
        0x054EFA1F65B0FCE283808965275D877B438DA23CE5B13E1963798CB1447D25A4,
        0x1B162F83D917E93EDB3308C29802DEB9D8AA690113B2E14864CCF6E18E4165F1,
        0x21E5241E12564DD6FD9F1CDD2A0DE39EEDFEFC1466CC568EC5CEB745A0506EDC,
    ),
    (
        0x1CFB5662E8CF5AC9226A80EE17B36ABECB73AB5F87E161927B4349E10E4BDF08,
        0x0F21177E302A771BBAE6D8D1ECB373B62C99AF346220AC0129C53F666EB24100,
        0x1671522374606992AFFB0DD7F71B12BEC4236AEDE6290546BCEF7E1F515C2320,
    ),
    (
        0x0FA3EC5B9488259C2EB4CF24501BFAD9BE2EC9E42C5CC8CCD419D2A692CAD870,
        0x193C0E04E0BD298357CB266C1506080ED36EDCE85C648CC085E8C57B1AB54BBA,
        0x102ADF8EF74735A27E9128306DCBC3C99F6F7291CD406578CE14EA2ADABA68F8,
    ),
    (
        0x0FE0AF7858E49859E2A54D6F1AD945B1316AA24BFBDD23AE40A6D0CB70C3EAB1,
        0x216F6717BBC7DEDB08536A2220843F4E2DA5F1DAA9EBDEFDE8A5EA7344798D22,
        0x1DA55CC900F0D21F4A3E694391918A1B3C23B2AC773C6B3EF88E2E4228325161,
    ),
)