"""Poseidon parameters over BN254 for a state of width 2 (one input)."""

MDS: tuple[tuple[int, int], ...] = (
    (
        0x066F6F85D6F68A85EC10345351A23A3AAF07F38AF8C952A7BCECA70BD2AF7AD5,
        0x2B9D4B4110C9AE997782E1509B1D0FDB20A7C02BBD8BEA7305462B9F8125B1E8,
    ),
    (
        0x0CC57CDBB08507D62BF67A4493CC262FB6C09D557013FFF1F573F431221F8FF9,
        0x1274E649A32ED355A31A6ED69724E1ADADE857E86EB5C3A121BCD147943203C8,
    ),
)

ROUND_CONSTANTS: tuple[tuple[int, int], ...] = (
    (
        0x09C46E9EC68E9BD4FE1FAABA294CBA38A71AA177534CDD1B6C7DC0DBD0ABD7A7,
        0x0C0356530896EEC42A97ED937F3135CFC5142B3AE405B8343C1D83FFA604CB81,
    ),
    (
        0x1E28A1D935698AD1142E51182BB54CF4A00EA5AABD6268BD317EA977CC154A30,
        0x27AF2D831A9D2748080965DB30E298E40E5757C3E008DB964CF9E2B12B91251F,
    ),
    (
        0x1E6F11CE60FC8F513A6A3CFE16AE175A41291462F214CD0879AAF43545B74E03,
        0x2A67384D3BBD5E438541819CB681F0BE04462ED14C3613D8F719206268D142D3,
    ),
    (
        0x0B66FDF356093A611609F8E12FBFECF0B985E381F025188936408F5D5C9F45D0,
        0x012EE3EC1E78D470830C61093C2ADE370B26C83CC5CEBEEDDAA6852DBDB09E21,
    ),
    (
        0x0252BA5F6760BFBDFD88F67F8175E3FD6CD1C431B099B6BB2D108E7B445BB1B9,
        0x179474CCECA5FF676C6BEC3CEF54296354391A8935FF71D6EF5AEAAD7CA932F1,
    ),
    (
        0x2C24261379A51BFA9228FF4A503FD4ED9C1F974A264969B37E1A2589BBED2B91,
        0x1CC1D7B62692E63EAC2F288BD0695B43C2F63F5001FC0FC553E66C0551801B05,
    ),
    (
        0x255059301AADA98BB2ED55F852979E9600784DBF17FBACD05D9EFF5FD9C91B56,
        0x28437BE3AC1CB2E479E1F5C0ECCD32B3AEA24234970A8193B11C29CE7E59EFD9,
    ),
    (
        0x28216A442F2E1F711CA4FA6B53766EB118548DA8FB4F78D4338762C37F5F2043,
        0x2C1F47CD17FA5ADF1F39F4E7056DD03FEEE1EFCE03094581131F2377323482C9,
    ),
    (
        0x07ABAD02B7A5EBC48632BCC9356CEB7DD9DAFCA276638A63646B8566A621AFC9,
        0x0230264601FFDF29275B33FFAAB51DFE9429F90880A69CD137DA0C4D15F96C3C,
    ),
    (
        0x1BC973054E51D905A0F168656497CA40A864414557EE289E717E5D66899AA0A9,
        0x2E1C22F964435008206C3157E86341EDD249AFF5C2D8421F2A6B22288F0A67FC,
    ),
    (
        0x1224F38DF67C5378121C1D5F461BBC509E8EA1598E46C9F7A70452BC2BBA86B8,
        0x02E4E69D8BA59E519280B4BD9ED0068FD7BFE8CD9DFEDA1969D2989186CDE20E,
    ),
    (
        0x1F1ECCC34AABA0137F5DF81FC04FF3EE4F19EE364E653F076D47E9735D98018E,
        0x1672AD3D709A353974266C3039A9A7311424448032CD1819EACB8A4D4284F582,
    ),
    (
        0x283E3FDC2C6E420C56F44AF5192B4AE9CDA6961F284D24991D2ED602DF8C8FC7,
        0x1C2A3D120C550ECFD0DB0957170FA013683751F8FDFF59D6614FBD69FF394BCC,
    ),
    (
        0x216F84877AAC6172F7897A7323456EFE143A9A43773EA6F296CB6B8177653FBD,
        0x2C0D272BECF2A75764BA7E8E3E28D12BCEAA47EA61CA59A411A1F51552F94788,
    ),
    (
        0x16E34299865C0E28484EE7A74C454E9F170A5480ABE0508FCB4A6C3D89546F43,
        0x175CEBA599E96F5B375A232A6FB9CC71772047765802290F48CD939755488FC5,
    ),
    (
        0x0C7594440DC48C16FEAD9E1758B028066AA410BFBC354F54D8C5FFBB44A1EE32,
        0x1A3C29BC39F21BB5C466DB7D7EB6FD8F760E20013CCF912C92479882D919FD8D,
    ),
    (
        0x0CCFDD906F3426E5C0986EA049B253400855D349074F5A6695C8EEABCD22E68F,
        0x14F6BC81D9F186F62BDB475CE6C9411866A7A8A3FD065B3CE0E699B67DD9E796,
    ),
    (
        0x0962B82789FB3D129702CA70B2F6C5AACC099810C9C495C888EDEB7386B97052,
        0x1A880AF7074D18B3BF20C79DE25127BC13284AB01EF02575AFEF0C8F6A31A86D,
    ),
    (
        0x10CBA18419A6A332CD5E77F0211C154B20AF2924FC20FF3F4C3012BB7AE9311B,
        0x057E62A9A8F89B3EBDC76BA63A9EACA8FA27B7319CAE3406756A2849F302F10D,
    ),
    (
        0x287C971DE91DC0ABD44ADF5384B4988CB961303BBF65CFF5AFA0413B44280CEE,
        0x21DF3388AF1687BBB3BCA9DA0CCA908F1E562BC46D4ABA4E6F7F7960E306891D,
    ),
    (
        0x1BE5C887D25BCE703E25CC974D0934CD789DF8F70B498FD83EFF8B560E1682B3,
        0x268DA36F76E568FB68117175CEA2CD0DD2CB5D42FDA5ACEA48D59C2706A0D5C1,
    ),
    (
        0x0E17AB091F6EAE50C609BEAF5510ECECC5D8BB74135EBD05BD06460CC26A5ED6,
        0x04D727E728FFA0A67AEE535AB074A43091EF62D8CF83D270040F5CAA1F62AF40,
    ),
    (
        0x0DDBD7BF9C29341581B549762BC022ED33702AC10F1BFD862B15417D7E39CA6E,
        0x2790EB3351621752768162E82989C6C234F5B0D1D3AF9B588A29C49C8789654B,
    ),
    (
        0x1E457C601A63B73E4471950193D8A570395F3D9AB8B2FD0984B764206142F9E9,
        0x21AE64301DCA9625638D6AB2BBE7135FFA90ECD0C43FF91FC4C686FC46E091B0,
    ),
    (
        0x0379F63C8CE3468D4DA293166F494928854BE9E3432E09555858534EED8D350B,
        0x002D56420359D0266A744A080809E054CA0E4921A46686AC8C9F58A324C35049,
    ),
    (
        0x123158E5965B5D9B1D68B3CD32E10BBEDA8D62459E21F4090FC2C5AF963515A6,
        0x0BE29FC40847A941661D14BBF6CBE0420FBB2B6F52836D4E60C80EB49CAD9EC1,
    ),
    (
        0x1AC96991DEC2BB0557716142015A453C36DB9D859CAD5F9A233802F24FDF4C1A,
        0x1596443F763DBCC25F4964FC61D23B3E5E12C9FA97F18A9251CA3355BCB0627E,
    ),
    (
        0x12E0BCD3654BDFA76B2861D4EC3AEAE0F1857D9F17E715AED6D049EAE3BA3212,
        0x0FC92B4F1BBEA82B9EA73D4AF9AF2A50CEABAC7F37154B1904E6C76C7CF964BA,
    ),
    (
        0x1F9C0B1610446442D6F2E592A8013F40B14F7C7722236F4F9C7E965233872762,
        0x0EBD74244AE72675F8CDE06157A782F4050D914DA38B4C058D159F643DBBF4D3,
    ),
    (
        0x2CB7F0ED39E16E9F69A9FAFD4AB951C03B0671E97346EE397A839839DCCFC6D1,
        0x1A9D6E2ECFF022CC5605443EE41BAB20CE761D0514CE526690C72BCA7352D9BF,
    ),
    (
        0x2A115439607F335A5EA83C3BC44A9331D0C13326A9A7BA3087DA182D648EC72F,
        0x23F9B6529B5D040D15B8FA7AEE3E3410E738B56305CD44F29535C115C5A4C060,
    ),
    (
        0x05872C16DB0F72A2249AC6BA484BB9C3A3CE97C16D58B68B260EB939F0E6E8A7,
        0x1300BDEE08BB7824CA20FB80118075F40219B6151D55B5C52B624A7CDEDDF6A7,
    ),
    (
        0x19B9B63D2F108E17E63817863A8F6C288D7AD29916D98CB1072E4E7B7D52B376,
        0x015BEE1357E3C015B5BDA237668522F613D1C88726B5EC4224A20128481B4F7F,
    ),
    (
        0x2953736E94BB6B9F1B9707A4F1615E4EFE1E1CE4BAB218CBEA92C785B128FFD1,
        0x0B069353BA091618862F806180C0385F851B98D372B45F544CE7266ED6608DFC,
    ),
    (
        0x304F74D461CCC13115E4E0BCFB93817E55AEB7EB9306B64E4F588AC97D81F429,
        0x15BBF146CE9BCA09E8A33F5E77DFE4F5AAD2A164A4617A4CB8EE5415CDE913FC,
    ),
    (
        0x0AB4DFE0C2742CDE44901031487964ED9B8F4B850405C10CA9FF23859572C8C6,
        0x0E32DB320A044E3197F45F7649A19675EF5EEDFEA546DEA9251DE39F9639779A,
    ),
    (
        0x0A1756AA1F378CA4B27635A78B6888E66797733A82774896A3078EFA516DA016,
        0x044C4A33B10F693447FD17177F952EF895E61D328F85EFA94254D6A2A25D93EF,
    ),
    (
        0x2ED3611B725B8A70BE655B537F66F700FE0879D79A496891D37B07B5466C4B8B,
        0x1F9BA4E8BAB7CE42C8ECC3D722AA2E0EADFDEB9CFDD347B5D8339EA7120858AA,
    ),
    (
        0x1B233043052E8C288F7EE907A84E518AA38E82AC4502066DB74056F865C5D3DA,
        0x2431E1CC164BB8D074031AB72BD55B4C902053BFC0F14DB0CA2F97B020875954,
    ),
    (
        0x082F934C91F5AAC330CD6953A0A7DB45A13E322097583319A791F273965801FD,
        0x2B9A0A223E7538B0A34BE074315542A3C77245E2AE7CBE999AD6BB930C48997C,
    ),
    (
        0x0E1CD91EDD2CFA2CCEB85483B887A9BE8164163E75A8A00EB0B589CC70214E7D,
        0x2E1EAC0F2BFDFD63C951F61477E3698999774F19854D00F588D324601CEBE2F9,
    ),
    (
        0x0CBFA95F37FB74060C76158E769D6D157345784D8EFDB33C23D748115B500B83,
        0x08F05B3BE923ED44D65AD49D8A61E9A676D991E3A77513D9980C232DFA4A4F84,
    ),
    (
        0x22719E2A070BCD0852BF8E21984D0443E7284925DC0758A325A2DD510C047EF6,
        0x041F596A9EE1CB2BC060F7FCC3A1AB4C7BDBF036119982C0F41F62B2F26830C0,
    ),
    (
        0x233FD35DE1BE520A87628EB06F6B1D4C021BE1C2D0DC464A19FCDD0986B10F89,
        0x0524B46D1AA87A5E4325E0A423EBC810D31E078AA1B4707EEFCB453C61C9C267,
    ),
    (
        0x2C34F424C81E5716CE47FCAC894B85824227BB954B0F3199CC4486237C515211,
        0x0B5F2A4B63387819207EFFC2B5541FB72DD2025B5457CC97F33010327DE4915E,
    ),
    (
        0x22207856082CCC54C5B72FE439D2CFD6C17435D2F57AF6CEAEFAC41FE05C659F,
        0x24D57A8BF5DA63FE4E24159B7F8950B5CDFB210194CAF79F27854048CE2C8171,
    ),
    (
        0x0AFAB181FDD5E0583B371D75BD693F98374AD7097BB01A8573919BB23B79396E,
        0x2DBA9B108F208772998A52EFAC7CBD5676C0057194C16C0BF16290D62B1128EE,
    ),
    (
        0x26349B66EDB8B16F56F881C788F53F83CBB83DE0BD592B255AFF13E6BCE420B3,
        0x25AF7CE0E5E10357685E95F92339753AD81A56D28ECC193B235288A3E6F137DB,
    ),
    (
        0x25B4CE7BD2294390C094D6A55EDD68B970EED7AAE88B2BFF1F7C0187FE35011F,
        0x22C543F10F6C89EC387E53F1908A88E5DE9CEF28EBDF30B18CB9D54C1E02B631,
    ),
    (
        0x0236F93E7789C4724FC7908A9F191E1E425E906A919D7A34DF668E74882F87A9,
        0x29350B401166CA010E7D27E37D05DA99652BDAE114EB01659CB497AF980C4B52,
    ),
    (
        0x0EED787D65820D3F6BD31BBAB547F75A65EDB75D844EBB89EE1260916652363F,
        0x07CC1170F13B46F2036A753F520B3291FDCD0E99BD94297D1906F656F4DE6FAD,
    ),
    (
        0x22B939233B1D7205F49BCF613A3D30B1908786D7F9F5D10C2059435689E8ACEA,
        0x01451762A0AAB81C8AAD1DC8BC33E870740F083A5AA85438ADD650ACE60AE5A6,
    ),
    (
        0x23506BB5D8727D4461FABF1025D46D1FE32EAA61DEC7DA57E704FEC0892FCE89,
        0x2E484C44E838AEA0BAC06AE3F71BDD092A3709531E1EFEA97F8BD68907355522,
    ),
    (
        0x0F4BC7D07EBAFD64379E78C50BD2E42BAF4A594545CEDC2545418DA26835B54C,
        0x1F4D3C8F6583E9E5FA76637862FAAEE851582388725DF460E620996D50D8E74E,
    ),
    (
        0x093514E0C70711F82660D07BE0E4A988FAE02ABC7B681D9153EB9BCB48FE7389,
        0x1ADAB0C8E2B3BAD346699A2B5F3BC03643EE83ECE47228F24A58E0A347E153D8,
    ),
    (
        0x1672B1726057D99DD14709EBB474641A378C1B94B8072BAC1A22DBEF9E80DAD2,
        0x1DFD53D4576AF2E38F44F53FDCAB468CC5D8E2FAE0ACC4EE30D47B239B479C14,
    ),
    (
        0x0C6888A10B75B0F3A70A36263A37E17FE6D77D640F6FC3DEBC7F207753205C60,
        0x1ADDB933A65BE77092B34A7E77D12FE8611A61E00EE6848B85091ECCA9D1E508,
    ),
    (
        0x00D7540DCD268A845C10AE18D1DE933CF638FF5425F0AFFF7935628E299D1791,
        0x140C0E42687E9EAD01B2827A5664CA9C26FEDDE4ACD99DB1D316939D20B82C0E,
    ),
    (
        0x2F0C3A115D4317D191BA89B8D13D1806C20A0F9B24F8C5EDC091E2AE56565984,
        0x0C4EE778FF7C14553006ED220CF9C81008A0CFF670B22B82D8C538A1DC958C61,
    ),
    (
        0x1704F2766D46F82C3693F00440CCC3609424ED26C0ACC66227C3D7485DE74C69,
        0x2F2D19CC3EA5D78EA7A02C1B51D244ABF0769C9F8544E40239B66FE9009C3CFA,
    ),
    (
        0x1AE03853B75FCABA5053F112E2A8E8DCDD7EE6CB9CFED9C7D6C766A806FC6629,
        0x0971AABF795241DF51D131D0FA61AA5F3556921B2D6F014E4E41A86DDAF056D5,
    ),
    (
        0x1408C316E6014E1A91D4CF6B6E0DE73EDA624F8380DF1C875F5C29F7BFE2F646,
        0x1667F3FE2EDBE850248ABE42B543093B6C89F1F773EF285341691F39822EF5BD,
    ),
    (
        0x13BF7C5D0D2C4376A48B0A03557CDF915B81718409E5C133424C69576500FE37,
        0x07620A6DFB0B6CEC3016ADF3D3533C24024B95347856B79719BC0BA743A62C2C,
    ),
    (
        0x1574C7EF0C43545F36A8CA08BDBDD8B075D2959E2F322B731675DE3E1982B4D0,
        0x269E4B5B7A2EB21AFD567970A717CEEC5BD4184571C254FDC06E03A7FF8378F0,
    ),
)